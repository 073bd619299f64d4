from typing import NewType

AssetId = NewType("AssetId", int)  # 64-bit integer GUID
SystemId = NewType("SystemId", str)

# Opaque freshness marker for a source path. 0 means "unknown".
Timestamp = int
