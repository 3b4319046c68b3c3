"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "analyzer.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Analyzer configuration for rest-schema-analyzer.
# Every key is optional; the values below are the built-in defaults.

# How many levels of referenced resources are expanded into their own schemas
# before a shallow id/uuid/display object is inlined instead. 0 never expands.
depth_budget: 2

# Referenceable types that may only ever appear as nested fields.
core_domain_types:
  - Person
  - Patient
  - User
  - Provider
  - Encounter
  - Visit
  - Obs
  - Order
  - Concept
  - Drug
  - Location
  - Program
  - Role
  - Privilege
  - Form
  - Field
  - PatientIdentifier
  - PersonName
  - PersonAddress
  - PersonAttribute

# Catalog types searched for a field when a nested representation cannot be
# resolved on the resource's own delegate type. Names missing from the
# catalog's types section are ignored.
common_base_types:
  - BaseOpenmrsObject
  - BaseOpenmrsMetadata
  - BaseOpenmrsData
  - Person
  - User
  - Patient
  - Encounter
  - Obs
  - Concept
  - Location
  - Provider

# Exact field names with a fixed type when nothing better is known.
well_known_fields:
  id: Integer
  uuid: String
  display: String
  voided: Boolean
  retired: Boolean
  dateCreated: DateTime
  dateChanged: DateTime
  dateVoided: DateTime
  dateRetired: DateTime
  auditInfo: Object
  links: List<Link>

known_collection_fields:
  roles: List<Role>
  privileges: List<Privilege>
  names: List<PersonName>
  addresses: List<PersonAddress>
  identifiers: List<PatientIdentifier>
  attributes: List<PersonAttribute>

# Metadata values that name a representation rather than a type.
representation_literals:
  - REF
  - DEFAULT
  - FULL
  - Ref
  - Default
  - Full

api:
  title: "REST API"
  version: "1.0.0"
  description: "Schemas generated from the resource catalog by rest-schema-analyzer."
  base_path: "/ws/rest/v1"
"""


def build_default_configuration() -> str:
    """Build the YAML analyzer configuration listing every default with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_default_configuration(output_path: Path | str) -> Path:
    """Write the analyzer configuration scaffold to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(
            f"Analyzer configuration file already exists: {destination.resolve()}"
        )
    destination.write_text(build_default_configuration(), encoding="utf-8")
    return destination.resolve()
