# ddrconf/version.py
# Version constants. Single authoritative definition.
# Referenced by the loader, the serializer, the dump writer and both CLIs
# for version stamping.

TOOL_VERSION: str = "1.0.0"

# JSON timing configuration format accepted by ConfigLoader.
CONFIG_FORMAT_VERSION: str = "1.0.0"

# Text dump layout written by ConfigDumper.
DUMP_FORMAT_VERSION: str = "1.0.0"
