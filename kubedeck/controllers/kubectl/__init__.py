"""kubectl resource query service."""

from kubedeck.controllers.kubectl.controller import (
    Flags,
    KubectlController,
    ResourceQueryService,
)
from kubedeck.controllers.kubectl.request import KubectlRequest

__all__ = ["Flags", "KubectlController", "KubectlRequest", "ResourceQueryService"]
