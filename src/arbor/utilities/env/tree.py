from arbor.utilities.env.parsing import _env_float, _env_int, _env_str

DEFAULT_BRANCH_MAX_WIDTH = 1000
DEFAULT_BRANCH_MAX_LENGTH = 10000
DEFAULT_BRANCHING_MIN_WIDTH = 20
DEFAULT_BRANCH_COLOR = "white"
DEFAULT_DEAD_BRANCH_COLOR = "gray"
DEFAULT_ANGLE_JITTER = 1.0
DEFAULT_ANGLE_JITTER_MAX = 45.0
DEFAULT_ANGLE_JITTER_STEP = 1.0


class TreeConfiguration:
    @classmethod
    def tree_branch_max_width(cls) -> int:
        return _env_int(
            "ARBOR_TREE_BRANCH_MAX_WIDTH",
            default=DEFAULT_BRANCH_MAX_WIDTH,
            minimum=1,
        )

    @classmethod
    def tree_branch_max_length(cls) -> int:
        return _env_int(
            "ARBOR_TREE_BRANCH_MAX_LENGTH",
            default=DEFAULT_BRANCH_MAX_LENGTH,
            minimum=1,
        )

    @classmethod
    def tree_branching_min_width(cls) -> int:
        return _env_int(
            "ARBOR_TREE_BRANCHING_MIN_WIDTH",
            default=DEFAULT_BRANCHING_MIN_WIDTH,
            minimum=0,
        )

    @classmethod
    def tree_branch_color(cls) -> str:
        return _env_str("ARBOR_TREE_BRANCH_COLOR", default=DEFAULT_BRANCH_COLOR)

    @classmethod
    def tree_dead_branch_color(cls) -> str:
        return _env_str(
            "ARBOR_TREE_DEAD_BRANCH_COLOR", default=DEFAULT_DEAD_BRANCH_COLOR
        )

    @classmethod
    def tree_angle_jitter(cls) -> float:
        return _env_float(
            "ARBOR_TREE_ANGLE_JITTER",
            default=DEFAULT_ANGLE_JITTER,
            minimum=0.0,
            maximum=cls.tree_angle_jitter_max(),
        )

    @classmethod
    def tree_angle_jitter_max(cls) -> float:
        return _env_float(
            "ARBOR_TREE_ANGLE_JITTER_MAX",
            default=DEFAULT_ANGLE_JITTER_MAX,
            minimum=0.0,
        )

    @classmethod
    def tree_angle_jitter_step(cls) -> float:
        return _env_float(
            "ARBOR_TREE_ANGLE_JITTER_STEP",
            default=DEFAULT_ANGLE_JITTER_STEP,
            minimum=0.0,
        )
