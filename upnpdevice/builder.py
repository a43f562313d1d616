"""
Builds the device tree from a query context scoped to a `<device>` element.

Any mandatory field or element missing anywhere in the tree aborts the whole
build; there is no such thing as a partially built tree.
"""
from .const import MAX_DEVICE_DEPTH
from .device import Device, Icon
from .errors import DeviceTreeTooDeep, MissingMandatoryField, PathNotFound
from .fields import FieldExtractor
from .service import Service
from .urls import resolve_url
from .util import _getLogger


class DeviceTreeBuilder(object):
    def __init__(self, root, url_base, max_depth=MAX_DEVICE_DEPTH):
        self.root = root
        self.url_base = url_base
        self.max_depth = max_depth
        self._log = _getLogger("DeviceTreeBuilder")

    def build(self, device, parent, context, depth=0):
        """
        Populate `device` (and, recursively, its embedded devices) from
        `context`.
        """
        if depth > self.max_depth:
            raise DeviceTreeTooDeep(
                "Embedded devices nested more than %d levels deep" % self.max_depth
            )
        fields = FieldExtractor(context)

        device.device_type = fields.mandatory("deviceType")
        self._log.debug("Parsing device %s", device.device_type)
        device.friendly_name = fields.mandatory("friendlyName")
        device.model_name = fields.mandatory("modelName")
        device.udn = fields.mandatory("UDN")
        device.usn = "%s::%s" % (device.udn, device.device_type)

        device.manufacturer = fields.optional("manufacturer")
        device.manufacturer_url = fields.optional_url("manufacturerURL", self.url_base)
        device.model_description = fields.optional("modelDescription")
        device.model_number = fields.optional("modelNumber")
        device.model_url = fields.optional_url("modelURL", self.url_base)
        device.serial_number = fields.optional("serialNumber")
        device.presentation_url = fields.optional_url("presentationURL", self.url_base)
        device.upc = fields.optional_long("UPC")

        device.parent = parent

        self.build_services(device, context)
        self.build_icons(device, context)
        self.build_child_devices(device, context, depth)
        return device

    def _list_context(self, context, name):
        return context.get_relative_context(context.get_pointer(name))

    def _count(self, list_context, name):
        return int(list_context.get_number("count( %s )" % name))

    def build_services(self, device, context):
        try:
            list_context = self._list_context(context, "serviceList")
        except PathNotFound:
            raise MissingMandatoryField("serviceList") from None
        count = self._count(list_context, "service")
        self._log.debug("Device services count is %d", count)
        device.services = []
        device.service_map = {}
        for i in range(1, count + 1):
            service_context = self._list_context(list_context, "service[%d]" % i)
            service = Service(service_context, self.url_base, self.root, device=device)
            self._log.debug(
                "%s: Service %r at %r", device.friendly_name, service.service_type,
                service.scpd_url
            )
            device.add_service(service)

    def build_icons(self, device, context):
        try:
            list_context = self._list_context(context, "iconList")
        except PathNotFound:
            return
        count = self._count(list_context, "icon")
        self._log.debug("Device icons count is %d", count)
        device.icons = []
        for i in range(1, count + 1):
            fields = FieldExtractor(self._list_context(list_context, "icon[%d]" % i))
            icon = Icon(
                fields.mandatory("mimetype"),
                fields.mandatory_int("width"),
                fields.mandatory_int("height"),
                fields.mandatory_int("depth"),
                # Unlike device URLs, a bad icon URL fails the build.
                resolve_url(fields.mandatory("url"), self.url_base),
            )
            self._log.debug("Icon URL is %s", icon.url)
            device.icons.append(icon)

    def build_child_devices(self, device, context, depth):
        try:
            list_context = self._list_context(context, "deviceList")
        except PathNotFound:
            return
        count = self._count(list_context, "device")
        self._log.debug("Child devices count is %d", count)
        device.child_devices = []
        for i in range(1, count + 1):
            child_context = self._list_context(list_context, "device[%d]" % i)
            child = self.build(Device(), device, child_context, depth + 1)
            self._log.debug("Adding child device %s", child.device_type)
            device.child_devices.append(child)
