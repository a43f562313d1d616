#!/usr/bin/env python
#
# Read a device description and dump the device tree.
#

import logging
import sys

import upnpdevice

logging.basicConfig(level=logging.INFO)

location = sys.argv[1] if len(sys.argv) > 1 else 'http://192.168.1.254:80/upnp/IGD.xml'

try:
    root = upnpdevice.RootDevice(location, 1800)
except upnpdevice.UPNPError as exc:
    print("Unable to read %s: %s" % (location, exc))
    sys.exit(1)


def dump(device, indent=0):
    pad = '   ' * indent
    print("%s%s (%s)" % (pad, device.friendly_name, device.device_type))
    for service in device.services:
        print("%s   %s: %s" % (pad, service.service_id, service.control_url))
    for icon in device.icons or []:
        print("%s   icon %s %dx%d: %s" % (pad, icon.mime_type, icon.width, icon.height, icon.url))
    for child in device.child_devices or []:
        dump(child, indent + 1)


print("UPnP %d.%d, URLBase %s" % (root.spec_version_major, root.spec_version_minor, root.url_base))
dump(root)
