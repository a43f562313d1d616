import weakref

from .fields import FieldExtractor
from .util import _getLogger


class Service(object):
    """
    A service entry from a device's `serviceList`. Only the identity of the
    service and the location of its SCPD, control and eventing endpoints are
    kept; the service description itself is not fetched.

    URLs are resolved against `url_base`. A malformed endpoint URL is logged
    and left as `None` rather than failing the whole device.
    """

    def __init__(self, context, url_base, root, device=None):
        self._log = _getLogger("Service")
        self._root = weakref.ref(root) if root is not None else None
        self._device = weakref.ref(device) if device is not None else None
        self.url_base = url_base

        fields = FieldExtractor(context)
        self.service_type = fields.mandatory("serviceType")
        self.service_id = fields.mandatory("serviceId")
        self.scpd_url = fields.optional_url("SCPDURL", url_base)
        self.control_url = fields.optional_url("controlURL", url_base)
        self.event_sub_url = fields.optional_url("eventSubURL", url_base)

        self._log.debug("%s url_base: %s", self.service_id, self.url_base)
        self._log.debug("%s SCPDURL: %s", self.service_id, self.scpd_url)
        self._log.debug("%s controlURL: %s", self.service_id, self.control_url)
        self._log.debug("%s eventSubURL: %s", self.service_id, self.event_sub_url)

    def __repr__(self):
        return "<Service service_id='%s'>" % (self.service_id)

    @property
    def name(self):
        try:
            return self.service_id[self.service_id.rindex(":") + 1:]
        except ValueError:
            return self.service_id

    @property
    def root(self):
        return self._root() if self._root is not None else None

    @property
    def device(self):
        return self._device() if self._device is not None else None
