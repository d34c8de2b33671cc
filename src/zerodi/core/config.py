import yaml
from pydantic import BaseModel, ConfigDict

class RegistryConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "registry"
    check_types: bool = True
    log_level: str = "INFO"

def load_config(path: str) -> RegistryConfig:
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}
    return RegistryConfig(**data)
