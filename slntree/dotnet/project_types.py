"""Project type registry - maps .sln type GUIDs to project categories."""

from __future__ import annotations

import uuid

from slntree.config import ProjectType

# Known project type GUIDs
_SOLUTION_FOLDER_GUID = "2150E333-8FDC-42A3-9474-1A3956D46DE8"
_CSHARP_GUID = "FAE04EC0-301F-11D3-BF4B-00C04F79EFBC"
_VBNET_GUID = "F184B08F-C81C-45F6-A57F-5ABD9991F28F"

_REGISTRY: dict[uuid.UUID, ProjectType] = {
    uuid.UUID(guid): project_type
    for guid, project_type in (
        (_SOLUTION_FOLDER_GUID, ProjectType.SOLUTION_FOLDER),
        (_CSHARP_GUID, ProjectType.CSHARP),
        ("9A19103F-16F7-4668-BE54-9A1E7A4F7556", ProjectType.CSHARP_SDK),
        (_VBNET_GUID, ProjectType.VBNET),
        ("778DAE3C-4631-46EA-AA77-85C1314464D9", ProjectType.VBNET_SDK),
        ("F2A71F9B-5D33-465A-A702-920D77279786", ProjectType.FSHARP),
        ("6EC3EE1D-3C4E-46DD-8F32-0CC8E7565705", ProjectType.FSHARP_SDK),
        ("8BC9CEB8-8B4A-11D0-8D11-00A0C91BC942", ProjectType.CPP),
        ("3AC096D0-A1C2-E12C-1390-A8335801FDAB", ProjectType.TEST),
        ("E24C65DC-7377-472B-9ABA-BC803B73C61A", ProjectType.WEB_SITE),
        ("349C5851-65DF-11DA-9384-00065B846F21", ProjectType.WEB_APPLICATION),
        ("00D1A9C2-B5F0-4AF3-8072-F6C62B433612", ProjectType.DATABASE),
        ("930C7802-8A8C-48F9-8165-68863BCCD9DD", ProjectType.WIX),
        ("D954291E-2A0B-460D-934E-DC6B0785DB48", ProjectType.SHARED),
        ("888888A0-9F3D-457C-B088-3A5042F75D52", ProjectType.PYTHON),
        ("9092AA53-FB77-4645-B42D-1CCCA6BD08BD", ProjectType.NODEJS),
        ("E53339B2-1760-4266-BCC7-CA923CBCF16C", ProjectType.DOCKER_COMPOSE),
    )
}


def map_project_type(type_id: uuid.UUID) -> ProjectType:
    """Classify a project type GUID. Unrecognised GUIDs map to UNKNOWN."""
    return _REGISTRY.get(type_id, ProjectType.UNKNOWN)

