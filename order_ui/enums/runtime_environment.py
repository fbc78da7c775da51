from enum import Enum


class RuntimeEnvironment(Enum):
    TEST = "TEST"
    DEV = "DEV"
    PROD = "PROD"
