import weakref


class Icon(object):
    """
    An entry of a device's `iconList`.
    """

    def __init__(self, mime_type, width, height, depth, url):
        self.mime_type = mime_type
        self.width = width
        self.height = height
        self.depth = depth
        self.url = url

    def __repr__(self):
        return "<Icon %s %dx%dx%d %s>" % (
            self.mime_type, self.width, self.height, self.depth, self.url)


class Device(object):
    """
    UPNP Device represention.

    A node of the device tree read from a description document. Attributes are
    filled in by `DeviceTreeBuilder`; optional fields the document doesn't
    provide are `None`.

    `icons` is `None` when the description has no `iconList` and an empty list
    when it has an empty one. `child_devices` behaves the same way for
    `deviceList`. `services` is always a list.

    Services can be looked up by their short name, either as attributes or as
    keys:

    >>> device.WANIPConn1
    <Service service_id='urn:upnp-org:serviceId:WANIPConn1'>
    >>> device['WANIPConn1']
    <Service service_id='urn:upnp-org:serviceId:WANIPConn1'>
    """

    def __init__(self):
        self.device_type = None
        self.friendly_name = None
        self.manufacturer = None
        self.manufacturer_url = None
        self.model_description = None
        self.model_name = None
        self.model_number = None
        self.model_url = None
        self.serial_number = None
        self.presentation_url = None
        self.udn = None
        self.usn = None
        self.upc = None

        self.services = []
        self.service_map = {}
        self.icons = None
        self.child_devices = None
        self._parent = None

    def __repr__(self):
        return "<Device '%s'>" % (self.friendly_name)

    def __getattr__(self, name):
        """
        Allow Services to be returned as members of the Device.
        """
        try:
            return self.__dict__["service_map"][name]
        except KeyError:
            raise AttributeError("No attribute or service found with name %r." % name)

    def __getitem__(self, key):
        """
        Allow Services to be returned as dictionary keys of the Device.
        """
        return self.service_map[key]

    def __dir__(self):
        """
        Add Service names to `dir(device)` output for use with tab-completion in repl.
        """
        return list(super(Device, self).__dir__()) + list(self.service_map.keys())

    @property
    def parent(self):
        """
        The device this one is embedded in, `None` for a root device.
        """
        return self._parent() if self._parent is not None else None

    @parent.setter
    def parent(self, device):
        self._parent = weakref.ref(device) if device is not None else None

    @property
    def is_root(self):
        return self._parent is None

    @property
    def root(self):
        device = self
        while device.parent is not None:
            device = device.parent
        return device

    def add_service(self, service):
        self.services.append(service)
        self.service_map[service.name] = service

    def all_child_devices(self):
        """
        Every embedded device below this one, depth first in document order.
        """
        devices = []
        for child in self.child_devices or []:
            devices.append(child)
            devices.extend(child.all_child_devices())
        return devices

    def find_child_device(self, device_type):
        for child in self.all_child_devices():
            if child.device_type == device_type:
                return child

    def services_of_type(self, service_type):
        return [s for s in self.services if s.service_type == service_type]

    def find_service(self, service_type):
        for service in self.services:
            if service.service_type == service_type:
                return service

    def find_service_in_tree(self, service_type):
        """
        Search this device and then its embedded devices for a service type.
        """
        for device in [self] + self.all_child_devices():
            service = device.find_service(service_type)
            if service is not None:
                return service
