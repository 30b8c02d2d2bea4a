"""Azure image references for supported operating systems."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class OSType(IntEnum):
    """Operating systems with known Azure images."""

    UBUNTU = 1
    RHEL = 2
    FEDORA = 3


FEDORA_IMAGE_GALLERY_BASE = (
    "/CommunityGalleries/Fedora-5e266ba4-2250-406d-adad-5d73860d958f/Images/"
)


@dataclass(frozen=True)
class ImageReference:
    """A marketplace image (publisher, offer, sku) or a community gallery image ID."""

    publisher: str = ""
    offer: str = ""
    sku: str = ""
    id: str = ""


_DEFAULT_IMAGE_REFS: dict[OSType, dict[str, ImageReference]] = {
    OSType.RHEL: {
        "x86_64": ImageReference(publisher="RedHat", offer="RHEL", sku="{0}_{1}"),
        "arm64": ImageReference(publisher="RedHat", offer="rhel-arm64", sku="{0}_{1}-arm64"),
    },
    OSType.UBUNTU: {
        "x86_64": ImageReference(
            publisher="Canonical", offer="ubuntu-{0}_{1}-lts-daily", sku="server"
        ),
    },
    OSType.FEDORA: {
        "x86_64": ImageReference(
            id=FEDORA_IMAGE_GALLERY_BASE + "Fedora-Cloud-{0}-x64/Versions/latest"
        ),
        "arm64": ImageReference(
            id=FEDORA_IMAGE_GALLERY_BASE + "Fedora-Cloud-{0}-Arm64/Versions/latest"
        ),
    },
}


def get_image_ref(os_type: OSType, arch: str, version: str) -> ImageReference:
    """Return the image reference for an OS, architecture and ``major.minor`` version."""
    try:
        os_type = OSType(os_type)
    except ValueError:
        raise ValueError("os type not supported") from None
    try:
        template = _DEFAULT_IMAGE_REFS[os_type][arch]
    except KeyError:
        raise ValueError(f"architecture {arch} not supported for {os_type.name}") from None

    parts = version.split(".")
    if os_type is OSType.FEDORA:
        return ImageReference(id=template.id.format(parts[0]))
    if len(parts) < 2:
        raise ValueError(f"version must be in the form major.minor, got {version!r}")
    major, minor = parts[0], parts[1]
    if os_type is OSType.UBUNTU:
        return ImageReference(
            publisher=template.publisher,
            offer=template.offer.format(major, minor),
            sku=template.sku,
        )
    return ImageReference(
        publisher=template.publisher,
        offer=template.offer,
        sku=template.sku.format(major, minor),
    )


def parse_community_gallery_id(image_id: str) -> tuple[str, str]:
    """Split a community gallery image ID into (gallery name, image name)."""
    parts = image_id.split("/")
    if len(parts) != 7:
        raise ValueError(f"invalid community gallery image ID: {image_id}")
    return parts[2], parts[4]