# Copyright (c) 2012-2016, Ferry Boender <ferry.boender@gmail.com>
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""
This module reads UPnP device description documents and turns them into a
tree of Python objects that a control point can navigate.

The usual flow for working with a UPnP device is:

- Discover the device using SSDP.

  SSDP is not part of this package. An SSDP advertisement (or M-SEARCH
  response) gives you the 'Location' of the description document, the
  'max-age' of the advertisement and the USN of the device.

- Build the device tree.

  Instantiate a RootDevice with the location and max-age. The description is
  fetched, its UPnP version checked and every embedded device, service and
  icon read into the tree. A document that doesn't respect the device
  description schema raises an exception; you never get half a device.

- Keep the device fresh.

  RootDevice.get_validity_time() tells you how many milliseconds are left
  before the advertisement expires. When a new advertisement for the same
  device arrives, call RootDevice.reset_validity_time(max_age).

Classes:

* RootDevice: The top of the tree, built from a description document.
* Device: An embedded device. RootDevice is a Device too.
* Service: Identity and endpoint URLs of a service offered by a device.
* Icon: An icon of a device.

The following example reads a device description and dumps its tree:

------------------------------------------------------------------------------
import upnpdevice

root = upnpdevice.RootDevice('http://192.168.1.254:80/upnp/IGD.xml', 1800)

for device in [root] + root.all_child_devices():
    print("%s (%s)" % (device.friendly_name, device.device_type))
    for service in device.services:
        print("   %s: %s" % (service.service_id, service.control_url))
------------------------------------------------------------------------------

Useful Links:

* https://embeddedinn.wordpress.com/tutorials/upnp-device-architecture/
* http://upnp.org/specs/arch/UPnP-arch-DeviceArchitecture-v1.1.pdf
"""
from upnpdevice import builder, const, errors, fields, urls, util, xpath  # noqa: F401
from .device import Device, Icon
from .errors import (
    UPNPError, StructuralViolation, MissingMandatoryField, InvalidNumericField,
    DeviceTreeTooDeep, VersionIncompatible, MalformedURL, InfrastructureFailure,
    DescriptionFetchError, InvalidDocument, QueryError, PathNotFound)
from .root import RootDevice
from .service import Service
from .urls import resolve_url

__all__ = [
    "Device", "Icon", "RootDevice", "Service", "resolve_url",
    "UPNPError", "StructuralViolation", "MissingMandatoryField", "InvalidNumericField",
    "DeviceTreeTooDeep", "VersionIncompatible", "MalformedURL", "InfrastructureFailure",
    "DescriptionFetchError", "InvalidDocument", "QueryError", "PathNotFound",
]
