"""abbr - personal abbreviation dictionary.

Stores short-form/long-form pairs (with an optional description) in a
single JSON file and looks them up again:

- **models/**: Entry, Item and StorageModification
- **persistence/**: Storage aggregate, JSON I/O (atomic writes), path resolution
- **validation/**: Shape checks for the storage document
- **commands/**: CLI command handlers
- **errors**: Typed error hierarchy with explicit failure states
"""

__version__ = "1.0.0"
