from typing import Annotated

from fastapi import Depends

from classical_ciphers.core.config import Settings, get_settings
from classical_ciphers.services.engines.registry import CipherRegistry


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_registry() -> CipherRegistry:
    """Get cipher registry."""
    return CipherRegistry()

RegistryDep = Annotated[CipherRegistry, Depends(get_registry)]
