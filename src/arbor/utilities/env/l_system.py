from arbor.utilities.env.parsing import _env_float, _env_int

DEFAULT_L_SYSTEM_DISTANCE = 10.0
DEFAULT_L_SYSTEM_ANGLE_DEGREES = 30.0
DEFAULT_L_SYSTEM_MAX_GENERATION = 5
DEFAULT_L_SYSTEM_UPDATE_INTERVAL_MS = 1000.0


class LSystemConfiguration:
    @classmethod
    def l_system_distance(cls) -> float:
        return _env_float(
            "ARBOR_LSYSTEM_DISTANCE", default=DEFAULT_L_SYSTEM_DISTANCE, minimum=0.0
        )

    @classmethod
    def l_system_angle_degrees(cls) -> float:
        return _env_float(
            "ARBOR_LSYSTEM_ANGLE_DEGREES", default=DEFAULT_L_SYSTEM_ANGLE_DEGREES
        )

    @classmethod
    def l_system_max_generation(cls) -> int:
        # Each generation multiplies the segment count by eight.
        return _env_int(
            "ARBOR_LSYSTEM_MAX_GENERATION",
            default=DEFAULT_L_SYSTEM_MAX_GENERATION,
            minimum=0,
        )

    @classmethod
    def l_system_update_interval_ms(cls) -> float:
        return _env_float(
            "ARBOR_LSYSTEM_UPDATE_INTERVAL_MS",
            default=DEFAULT_L_SYSTEM_UPDATE_INTERVAL_MS,
            minimum=1.0,
        )
