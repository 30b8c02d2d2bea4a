import pytest

from mapt.azure_images import (
    FEDORA_IMAGE_GALLERY_BASE,
    ImageReference,
    OSType,
    get_image_ref,
    parse_community_gallery_id,
)


def test_rhel_x86_64():
    ref = get_image_ref(OSType.RHEL, "x86_64", "9.4")
    assert ref == ImageReference(publisher="RedHat", offer="RHEL", sku="9_4")


def test_rhel_arm64():
    ref = get_image_ref(OSType.RHEL, "arm64", "9.4")
    assert ref.offer == "rhel-arm64"
    assert ref.sku == "9_4-arm64"


def test_ubuntu():
    ref = get_image_ref(OSType.UBUNTU, "x86_64", "24.04")
    assert ref.publisher == "Canonical"
    assert ref.offer == "ubuntu-24_04-lts-daily"
    assert ref.sku == "server"
    assert ref.id == ""


def test_fedora_ids():
    x86 = get_image_ref(OSType.FEDORA, "x86_64", "41")
    arm = get_image_ref(OSType.FEDORA, "arm64", "41.1")
    assert x86.id == FEDORA_IMAGE_GALLERY_BASE + "Fedora-Cloud-41-x64/Versions/latest"
    assert arm.id == FEDORA_IMAGE_GALLERY_BASE + "Fedora-Cloud-41-Arm64/Versions/latest"
    assert x86.publisher == ""


def test_unsupported_arch():
    with pytest.raises(ValueError):
        get_image_ref(OSType.UBUNTU, "arm64", "24.04")


def test_unsupported_os():
    with pytest.raises(ValueError, match="os type not supported"):
        get_image_ref(99, "x86_64", "1.0")


def test_version_without_minor():
    with pytest.raises(ValueError):
        get_image_ref(OSType.RHEL, "x86_64", "9")


def test_parse_fedora_gallery_id_round_trip():
    ref = get_image_ref(OSType.FEDORA, "arm64", "40")
    gallery, image = parse_community_gallery_id(ref.id)
    assert gallery == "Fedora-5e266ba4-2250-406d-adad-5d73860d958f"
    assert image == "Fedora-Cloud-40-Arm64"


@pytest.mark.parametrize("image_id", ["", "/a/b", "/a/b/c/d/e/f/g"])
def test_parse_invalid_gallery_id(image_id):
    with pytest.raises(ValueError, match="invalid community gallery image ID"):
        parse_community_gallery_id(image_id)