"""
Error keyword vocabulary (wire contract).

Error keywords are short tokens of the form ``{lowercase-hyphenated-name}``
embedded in free-text error messages so that status can be recovered after
the message has crossed a process or network boundary as a plain string.

The literal token values are a public cross-process contract shared with
device firmware, the cloud service, and CLI tools. Adding a keyword is
backward compatible; renaming or removing one is a breaking change.
"""
from __future__ import annotations

from typing import Tuple

KEYWORD_OPEN = "{"
KEYWORD_CLOSE = "}"

# Request and transaction errors
ERR_TIMEOUT = "{timeout}"
# notehub-to-notehub transaction
ERR_INTERNAL_TIMEOUT = "{internal-timeout}"
# notehub-to-customer-service transaction
ERR_ROUTE_TIMEOUT = "{route-timeout}"
ERR_CLOSED = "{closed}"
ERR_FILE_NOEXIST = "{file-noexist}"

# Notefiles, notes and trackers
ERR_NOTEFILE_NAME = "{notefile-bad-name}"
ERR_NOTEFILE_IN_USE = "{notefile-in-use}"
ERR_NOTEFILE_EXISTS = "{notefile-exists}"
ERR_NOTEFILE_NOEXIST = "{notefile-noexist}"
ERR_NOTEFILE_QUEUE_DISALLOWED = "{notefile-queue-disallowed}"
ERR_NOTE_NOEXIST = "{note-noexist}"
ERR_NOTE_EXISTS = "{note-exists}"
ERR_TOO_MANY_NOTES = "{too-many-notes}"
ERR_TRACKER_NOEXIST = "{tracker-noexist}"
ERR_TRACKER_EXISTS = "{tracker-exists}"

# Connectivity
ERR_NETWORK = "{network}"
ERR_REGISTRATION_FAILURE = "{registration-failure}"
ERR_EXTENDED_NETWORK_FAILURE = "{extended-network-failure}"
ERR_EXTENDED_SERVICE_FAILURE = "{extended-service-failure}"
ERR_HOST_UNREACHABLE = "{host-unreachable}"

# Firmware update
ERR_DFU_NOT_READY = "{dfu-not-ready}"
ERR_DFU_IN_PROGRESS = "{dfu-in-progress}"

# Authentication and access
ERR_AUTH = "{auth}"
ERR_TICKET = "{ticket}"
ERR_ACCESS_DENIED = "{access-denied}"

# Hub routing
ERR_HUB_NO_HANDLER = "{no-handler}"
# Unused
ERR_HUB_MODE = "{hub-mode}"

# Devices, products, apps, fleets
ERR_DEVICE_NOT_FOUND = "{device-noexist}"
ERR_DEVICE_NOT_SPECIFIED = "{device-none}"
ERR_DEVICE_ID = "{device-id-invalid}"
ERR_DEVICE_DISABLED = "{device-disabled}"
ERR_PRODUCT_NOT_FOUND = "{product-noexist}"
ERR_PRODUCT_NOT_SPECIFIED = "{product-none}"
ERR_APP_NOT_FOUND = "{app-noexist}"
ERR_APP_NOT_SPECIFIED = "{app-none}"
ERR_APP_DELETED = "{app-deleted}"
ERR_APP_EXISTS = "{app-exists}"
ERR_FLEET_NOT_FOUND = "{fleet-noexist}"

# Card I/O
ERR_CARD_IO = "{io}"
# Not used as a request error
ERR_CARD_HEARTBEAT = "{heartbeat}"

# Request content
ERR_WEB_PAYLOAD = "{web-payload}"
ERR_TEMPLATE_INCOMPATIBLE = "{template-incompatible}"
ERR_SYNTAX = "{syntax}"
ERR_INCOMPATIBLE = "{incompatible}"
ERR_REQ_NOT_SUPPORTED = "{not-supported}"
ERR_TOO_BIG = "{too-big}"
ERR_JSON = "{not-json}"

# Transport status reported by the card in a response status field
STATUS_IDLE = "{idle}"
STATUS_NTN_IDLE = "{ntn-idle}"
STATUS_TRANSPORT_CONNECTED = "{connected}"
STATUS_TRANSPORT_DISCONNECTED = "{disconnected}"
STATUS_TRANSPORT_CONNECTING = "{connecting}"
STATUS_TRANSPORT_CONNECT_FAILURE = "{connect-failure}"
STATUS_TRANSPORT_CONNECTED_CLOSED = "{connected-closed}"
STATUS_TRANSPORT_WAIT_SERVICE = "{wait-service}"
STATUS_TRANSPORT_WAIT_DATA = "{wait-data}"
STATUS_TRANSPORT_WAIT_GATEWAY = "{wait-gateway}"
STATUS_TRANSPORT_WAIT_MODULE = "{wait-module}"
STATUS_GPS_INACTIVE = "{gps-inactive}"

# Returned from routing transforms to request a fleet or routing behavior
ERR_ADD_TO_FLEET = "{add-to-fleet}"
ERR_REMOVE_FROM_FLEET = "{remove-from-fleet}"
ERR_LEAVE_FLEET_ALONE = "{leave-fleet-alone}"
ERR_DO_NOT_ROUTE = "{do-not-route}"

# Reconnect delay hints sent from the hub to a device
ERR_DEVICE_DELAY_5 = "{device-delay-5}"
ERR_DEVICE_DELAY_10 = "{device-delay-10}"
ERR_DEVICE_DELAY_15 = "{device-delay-15}"
ERR_DEVICE_DELAY_20 = "{device-delay-20}"
ERR_DEVICE_DELAY_30 = "{device-delay-30}"
ERR_DEVICE_DELAY_60 = "{device-delay-60}"


def all_keywords() -> Tuple[str, ...]:
    """Return every keyword in the vocabulary, in declaration order."""
    return tuple(
        value
        for name, value in globals().items()
        if name.startswith(("ERR_", "STATUS_")) and isinstance(value, str)
    )


__all__ = [
    name for name in list(globals()) if name.startswith(("ERR_", "STATUS_", "KEYWORD_"))
] + ["all_keywords"]
