from enum import StrEnum


class Demo(StrEnum):
    TREE = "tree"
    L_SYSTEM = "lsystem"
