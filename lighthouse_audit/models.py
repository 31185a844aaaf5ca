"""
Value objects passed between the audit stages
"""

import os
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class AttachmentTarget:
    """Borrowed page handle plus the port the engine attaches to"""

    page: Any
    port: int


@dataclass(frozen=True)
class ReportDestination:
    """Directory and unique base name for the generated reports"""

    directory: str
    base_name: str

    def path_for(self, extension: str) -> str:
        return os.path.join(self.directory, f"{self.base_name}.{extension}")


@dataclass(frozen=True)
class GeneratedFile:
    """Report artifact reference returned to the caller"""

    path: str
    media_type: str

    def to_dict(self) -> dict[str, str]:
        return {"path": self.path, "mediaType": self.media_type}


@dataclass
class AuditOutcome:
    """Raw engine result, lhr is the Lighthouse result object"""

    lhr: dict[str, Any]

    @property
    def categories(self) -> dict[str, Any]:
        return self.lhr.get("categories", {})


@dataclass
class AuditResponse:
    """Response of the lighthouse_audit tool"""

    code: list[str]
    files: list[GeneratedFile] = field(default_factory=list)
    scores: dict[str, Any] = field(default_factory=dict)
    capture_snapshot: bool = False
    wait_for_network: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": list(self.code),
            "files": [f.to_dict() for f in self.files],
            "captureSnapshot": self.capture_snapshot,
            "waitForNetwork": self.wait_for_network,
            "data": {"scores": dict(self.scores)},
        }
