import json
import os
from pathlib import Path

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"
ENV_VAR = "IDENTITYREF_CONFIG"


class GeneratorConfig:
    __slots__ = ("seed",)
    
    def __init__(self, seed=None):
        self.seed = seed


class LoggingConfig:
    __slots__ = ("level",)
    
    def __init__(self, level="INFO"):
        self.level = level


class Config:
    __slots__ = ("generator", "logging")
    
    def __init__(self, generator=None, logging=None):
        self.generator = generator or GeneratorConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            GeneratorConfig(**d.get("generator", {})),
            LoggingConfig(**d.get("logging", {})),
        )


def load_config(path=None):
    if path is None:
        path = os.environ.get(ENV_VAR)
    config_path = Path(path) if path else _DEFAULT_CONFIG
    
    if not config_path.exists():
        return Config()
    
    with open(config_path) as file:
        return Config.from_dict(json.load(file))
