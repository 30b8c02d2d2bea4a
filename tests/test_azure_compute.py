import pytest

from mapt.azure_compute import VirtualMachine, filter_offered_by_location, filter_vms


def make_sku(name, family="standardDSv5Family", vcpus="4", memory="16", arch="x64", **extra):
    caps = {
        "vCPUs": vcpus,
        "MemoryGB": memory,
        "CpuArchitectureType": arch,
        "HyperVGenerations": "V1,V2",
        "AcceleratedNetworkingEnabled": "True",
        "EncryptionAtHostSupported": "True",
        "PremiumIO": "True",
        "MaxResourceVolumeMB": "0",
        "LowPriorityCapable": "True",
    }
    caps.update(extra)
    return {
        "name": name,
        "family": family,
        "resourceType": "virtualMachines",
        "restrictions": [],
        "capabilities": [{"name": k, "value": v} for k, v in caps.items()],
    }


def test_from_sku_parses_capabilities():
    vm = VirtualMachine.from_sku(make_sku("Standard_D4s_v5", vcpus="4", memory="16"))
    assert vm.name == "Standard_D4s_v5"
    assert vm.vcpus == 4
    assert vm.memory == 16
    assert vm.hyperv_generations == ["V1", "V2"]
    assert vm.arch == "x64"
    assert vm.low_priority_capable is True
    assert vm.base_features_supported() is True


def test_from_sku_rejects_other_resource_types():
    sku = make_sku("disk")
    sku["resourceType"] = "disks"
    assert VirtualMachine.from_sku(sku) is None


def test_from_sku_rejects_restricted():
    sku = make_sku("Standard_D4s_v5")
    sku["restrictions"] = [{"type": "Location"}]
    assert VirtualMachine.from_sku(sku) is None


def test_from_sku_rejects_unparseable_values():
    assert VirtualMachine.from_sku(make_sku("Standard_A1", memory="0.75")) is None
    assert VirtualMachine.from_sku(make_sku("Standard_A1", PremiumIO="yes")) is None


@pytest.mark.parametrize(
    "family, expected",
    [
        ("standardDSv5Family", True),
        ("standardEv4Family", True),
        ("standardFSv2Family", True),
        ("standardDv2Family", False),
        ("standardBSFamily", False),
    ],
)
def test_nested_virt(family, expected):
    assert VirtualMachine(name="x", family=family).nested_virt_supported() is expected


def test_base_features_require_gen2_and_no_disk():
    vm = VirtualMachine.from_sku(make_sku("a", HyperVGenerations="V1"))
    assert vm.hyperv_gen2_supported() is False
    assert vm.base_features_supported() is False
    vm = VirtualMachine.from_sku(make_sku("b", MaxResourceVolumeMB="153600"))
    assert vm.empty_disk_supported() is False
    assert vm.base_features_supported() is False


def test_filter_vms_orders_by_cpus_and_filters():
    skus = [
        make_sku("Standard_D16s_v5", vcpus="16", memory="64"),
        make_sku("Standard_D2s_v5", vcpus="2", memory="8"),
        make_sku("Standard_D8s_v5", vcpus="8", memory="32"),
        make_sku("Standard_D4s_v5", vcpus="4", memory="16"),
        make_sku("Standard_D8ps_v5", vcpus="8", memory="32", arch="Arm64"),
        make_sku("Standard_E8-4s_v5", family="standardESv5Family", vcpus="8", memory="64"),
    ]
    got = filter_vms(skus, cpus=4, memory_gib=16, arch="x64", nested_virt=False, max_results=10)
    assert got == ["Standard_D4s_v5", "Standard_D8s_v5", "Standard_D16s_v5"]


def test_filter_vms_limits_and_deduplicates():
    skus = [make_sku("Standard_D4s_v5"), make_sku("Standard_D4s_v5")] + [
        make_sku(f"Standard_D{n}s_v5", vcpus=str(n)) for n in (8, 16, 32)
    ]
    got = filter_vms(skus, 1, 1, "x64", False, 2)
    assert got == ["Standard_D4s_v5", "Standard_D8s_v5"]


def test_filter_vms_nested_virt():
    skus = [
        make_sku("Standard_B4ms", family="standardBSFamily"),
        make_sku("Standard_D4s_v5"),
    ]
    assert filter_vms(skus, 1, 1, "x64", True, 10) == ["Standard_D4s_v5"]
    assert len(filter_vms(skus, 1, 1, "x64", False, 10)) == 2


def test_filter_offered_by_location():
    skus = [
        {"name": "Standard_D4s_v5", "locations": ["eastus"]},
        {"name": "Standard_D4s_v5", "locations": ["eastus"]},
        {"name": "Standard_D8s_v5", "locations": ["westus"]},
        {"name": "Standard_D2s_v5", "locations": ["eastus"]},
    ]
    got = filter_offered_by_location(skus, ["Standard_D4s_v5", "Standard_D8s_v5"], "eastus")
    assert got == ["Standard_D4s_v5"]
    assert filter_offered_by_location(skus, ["Standard_D8s_v5"], "eastus") == []