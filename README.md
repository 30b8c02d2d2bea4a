# mapt

Building blocks for provisioning short-lived cloud machines used in
testing. The package provides the following pieces:

- picking Azure spot capacity from price and eviction-rate data
- filtering Azure VM sizes from resource SKU records
- resolving image references
- naming resources
- default security group rules
- validating port mappings for kind clusters
- small utilities for caching, logging, templating and writing outputs

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `mapt.util`
  - `choose(cond, if_true, if_false)`, and `choose_lazy`, whose true branch is a callable that is only called when needed.
  - `split_string`: gives an empty list when the first part is empty.
  - `average`: gives NaN for an empty sequence.
  - `random_between(maximum, minimum)`: inclusive range. Raises `ValueError` when the range is inverted.
  - `random_item`: raises `IndexError` when empty.
  - `random_id(name)`: `name` plus eight hex digits.
- `mapt.sequences`
  - `sort_by_float`: sorts in place.
  - `split`: groups items into lists by a key, keeping their order.
  - `convert_map`: converts every key and value of a mapping.
- `mapt.resources`
  - `get_resource_name(prefix, component_id, type_abbrev)`: gives `prefix-component-type`, or `component-type` when the prefix is empty.
- `mapt.networking`
  - CIDR constants: `NETWORKING_CIDR_ANY_IPV4`, `NETWORKING_CIDR_ANY_IPV6`, `CIDR_VN` and `CIDR_SN`.
  - The `IngressRule` dataclass, with the predefined `SSH_TCP` and `RDP_TCP` rules.
  - `ingress_specs`: turns rules into dictionaries. A rule's security group is used if it has one, otherwise its CIDR block, otherwise any IPv4 address.
  - `egress_all`: allows all outbound traffic.
- `mapt.cache`
  - `Cache`: stores pickled copies of values.
  - Entries expire after `expire_seconds`, 60 by default; zero or less keeps them forever.
  - `get` raises `KeyError` for missing or expired keys.
- `mapt.log`
  - `init_logging(stream, level)`: attaches a handler to the `mapt` logger. It writes to stdout at DEBUG by default.
  - `open_log_file`: opens a file for appending, created with mode 0600.
  - `backup_log_file`: renames a file with a timestamp suffix.
  - `close_logging`: removes and closes the handlers.
- `mapt.templating`
  - `render_template(data, template_content)`: renders a Jinja2 template.
    - `data` may be a mapping, a dataclass or an object, and its fields become the template variables.
    - Undefined variables or bad syntax raise `TemplateError`.
  - `write_temp_file`: writes a temporary file and returns its path.
- `mapt.kind`
  - `KindArch` (`amd64`, `arm64`) and `PortMapping`.
  - `parse_extra_port_mappings`: parses a JSON array of port mappings.
    - Ports must be positive.
    - The protocol must be TCP or UDP in any letter case, and is upper-cased.
    - Anything else raises `ValueError`.
- `mapt.azure_images`
  - `OSType` (`UBUNTU`, `RHEL`, `FEDORA`) and `ImageReference`.
  - `get_image_ref(os_type, arch, version)`: gives the marketplace or community gallery reference for a `major.minor` version.
  - `parse_community_gallery_id`: gives the gallery and image names.
- `mapt.azure_compute`
  - `VirtualMachine.from_sku`: builds a machine from a resource SKU record.
  - Capability checks: `nested_virt_supported`, `hyperv_gen2_supported` and `base_features_supported`.
  - `filter_vms(skus, cpus, memory_gib, arch, nested_virt, max_results)`: gives matching size names, fewest vCPUs first.
  - `filter_offered_by_location`: gives the sizes that a SKU record lists for a location.
- `mapt.azure_spot`
  - `EvictionRate` bands and the `PriceHistory`, `EvictionRateRecord` and `SpotChoice` records.
  - `build_price_query` and `build_eviction_query`: build Resource Graph query strings.
  - Helpers: `os_type_for`, `parse_eviction_rate`, `higher_eviction_rate`, `eviction_rate_value` and `exclude_regions`.
  - `best_spot_choice` and `spot_choice_by_price`: each takes an optional `image_offered(location)` callable. Each raises `LookupError` when nothing fits.
- `mapt.azure_locations`
  - `set_identity_envs`: copies each `ARM_*` identity variable to its `AZURE_*` name.
  - `supports_resource_group`.
  - `suitable_resource_group_location`: falls back to the first supported location.
- `mapt.outputs`
  - `write_outputs(outputs, destination_folder, results)`: writes string outputs to files with mode 0600.
  - It skips missing and non-string values and returns the paths written.

## Example

```python
from mapt.kind import parse_extra_port_mappings
from mapt.resources import get_resource_name
from mapt.azure_images import OSType, get_image_ref

mappings = parse_extra_port_mappings(
    '[{"containerPort": 8080, "hostPort": 8080, "protocol": "tcp"}]'
)
print(mappings[0].protocol)          # TCP

print(get_resource_name("main", "aaks", "rg"))   # main-aaks-rg

ref = get_image_ref(OSType.RHEL, "x86_64", "9.4")
print(ref.sku)                       # 9_4
```

## What it does not do

This is a library with no command-line program. It does not talk to any cloud API and does not create or destroy infrastructure.

- Spot queries are built as strings but not run.
- SKU records, price rows, eviction rows and stack outputs must be fetched by the caller and passed in as plain data.