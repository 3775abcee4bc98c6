from arbor.utilities.env.parsing import _env_flag, _env_int

DEFAULT_WINDOW_SIZE = (1000, 1000)
DEFAULT_MAX_FPS = 60


class DisplayConfiguration:
    @classmethod
    def window_size(cls) -> tuple[int, int]:
        width = _env_int(
            "ARBOR_WINDOW_WIDTH", default=DEFAULT_WINDOW_SIZE[0], minimum=1
        )
        height = _env_int(
            "ARBOR_WINDOW_HEIGHT", default=DEFAULT_WINDOW_SIZE[1], minimum=1
        )
        return width, height

    @classmethod
    def max_fps(cls) -> int:
        return _env_int("ARBOR_MAX_FPS", default=DEFAULT_MAX_FPS, minimum=0)

    @classmethod
    def is_debug_mode(cls) -> bool:
        return _env_flag("ARBOR_DEBUG")
