"""Protocol constants.

Keep these in one place to avoid stringly-typed message handling.
"""

# Version of the kernel messaging protocol implemented here.
PROTOCOL_VERSION = "5.3"

# Separates routing identities from the signed protocol frames.
DELIMITER = b"<IDS|MSG>"

# The four JSON parts, in wire order.
HEADER = "header"
PARENT_HEADER = "parent_header"
METADATA = "metadata"
CONTENT = "content"

JSON_PARTS = (HEADER, PARENT_HEADER, METADATA, CONTENT)

# Header fields
MSG_ID = "msg_id"
MSG_TYPE = "msg_type"
VERSION = "version"
USERNAME = "username"
SESSION = "session"
DATE = "date"

# Status content
EXECUTION_STATE = "execution_state"
IDLE = "idle"
BUSY = "busy"

# History access types
RANGE = "range"
TAIL = "tail"
SEARCH = "search"
