HTTP_TIMEOUT = 10

SUPPORTED_SPEC_MAJOR = 1
# Highest minor version accepted, exclusive. UPnP 1.1 devices parse fine.
SUPPORTED_SPEC_MINOR_LIMIT = 2

MAX_DEVICE_DEPTH = 16

ROOT_ELEMENT = "root"
