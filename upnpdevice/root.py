import asyncio
import threading
import time

import aiohttp
import requests

from .builder import DeviceTreeBuilder
from .const import (
    HTTP_TIMEOUT, MAX_DEVICE_DEPTH, ROOT_ELEMENT, SUPPORTED_SPEC_MAJOR,
    SUPPORTED_SPEC_MINOR_LIMIT)
from .device import Device
from .errors import (
    DescriptionFetchError, InvalidDocument, MissingMandatoryField, PathNotFound,
    VersionIncompatible)
from .fields import FieldExtractor
from .urls import derive_url_base, is_absolute_url
from .util import _getLogger
from .xpath import XPathContext, parse_document


def _now_millis():
    return int(time.time() * 1000)


def _max_age_millis(max_age):
    try:
        return int(max_age) * 1000
    except TypeError:
        raise ValueError("max-age must be a number of seconds, got %r" % (max_age,)) from None


class RootDevice(Device):
    """
    The root device of a description document, holding every embedded device,
    service and icon below it.

    `location` is the URL of the description document, normally the
    'Location' header of an SSDP advertisement. `max_age` is the advertised
    validity in seconds. If `data` is given it is parsed instead of fetching
    `location`.

    Construction either produces a complete tree or raises:

    * `VersionIncompatible` if the document isn't UPnP 1.0 or 1.1,
    * a `StructuralViolation` if a mandatory field or element is missing,
    * a `MalformedURL` if an icon URL, or the base URL derived from
      `location`, can't be built,
    * an `InfrastructureFailure` if the document can't be fetched or parsed.

    Example:

    >>> device = RootDevice('http://192.168.1.254:80/upnp/IGD.xml', 1800)
    >>> for service in device.services:
    ...     print(service.service_id)
    ...
    urn:upnp-org:serviceId:layer3f
    urn:upnp-org:serviceId:wancic
    """

    def __init__(
        self,
        location,
        max_age,
        data=None,
        vendor_firmware=None,
        discovery_usn=None,
        discovery_udn=None,
        ignore_urlbase=False,
        http_auth=None,
        http_headers=None,
        max_depth=MAX_DEVICE_DEPTH,
    ):
        super(RootDevice, self).__init__()
        self.location = location
        self.vendor_firmware = vendor_firmware
        self.discovery_usn = discovery_usn
        self.discovery_udn = discovery_udn
        self.http_auth = http_auth
        self.http_headers = http_headers
        self._ignore_urlbase = ignore_urlbase
        self._log = _getLogger("RootDevice")

        self.spec_version_major = None
        self.spec_version_minor = None
        self.url_base = None
        self._description_text = None

        self._validity_lock = threading.Lock()
        self.creation_time = None
        self.validity_duration = None
        validity_duration = _max_age_millis(max_age)

        if data is None:
            data = self._get_device_description()
        self._set_device_attributes(data, max_depth)

        with self._validity_lock:
            self.validity_duration = validity_duration
            self.creation_time = _now_millis()

    def __repr__(self):
        return "<RootDevice '%s'>" % (self.friendly_name)

    @classmethod
    async def async_create(cls, location, max_age, session=None, **kwargs):
        """
        Asynchronously retrieve the description at `location` and build the
        root device from it. A session is created (and closed) if none is
        given.
        """
        _max_age_millis(max_age)
        http_auth = kwargs.get("http_auth")
        own_session = session is None
        if own_session:
            session = aiohttp.ClientSession()
        try:
            async with session.get(
                location,
                timeout=aiohttp.ClientTimeout(total=HTTP_TIMEOUT),
                auth=aiohttp.BasicAuth(*http_auth) if http_auth else None,
                headers=kwargs.get("http_headers"),
            ) as resp:
                resp.raise_for_status()
                data = await resp.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise DescriptionFetchError(
                "Unable to retrieve device description %s: %s" % (location, exc)
            ) from exc
        finally:
            if own_session:
                await session.close()
        return cls(location, max_age, data=data, **kwargs)

    @property
    def spec_version(self):
        return (self.spec_version_major, self.spec_version_minor)

    def _get_device_description(self):
        """
        Synchronously retrieve the device description.
        """
        try:
            resp = requests.get(
                self.location,
                timeout=HTTP_TIMEOUT,
                auth=self.http_auth,
                headers=self.http_headers,
            )
            resp.raise_for_status()
        except requests.exceptions.RequestException as exc:
            raise DescriptionFetchError(
                "Unable to retrieve device description %s: %s" % (self.location, exc)
            ) from exc
        return resp.content

    def _set_device_attributes(self, data, max_depth):
        root = parse_document(data)
        if root.tag != ROOT_ELEMENT:
            raise InvalidDocument(
                "Expected a %r document element, got %r" % (ROOT_ELEMENT, root.tag)
            )
        context = XPathContext(root)
        fields = FieldExtractor(context)

        self.spec_version_major = fields.mandatory_int("specVersion/major")
        self.spec_version_minor = fields.mandatory_int("specVersion/minor")
        if not (
            self.spec_version_major == SUPPORTED_SPEC_MAJOR
            and self.spec_version_minor < SUPPORTED_SPEC_MINOR_LIMIT
        ):
            raise VersionIncompatible(self.spec_version_major, self.spec_version_minor)

        self.url_base = self._read_url_base(fields)

        try:
            device_context = context.get_relative_context(context.get_pointer("device"))
        except PathNotFound:
            raise MissingMandatoryField("device") from None
        builder = DeviceTreeBuilder(self, self.url_base, max_depth=max_depth)
        builder.build(self, None, device_context)

    def _read_url_base(self, fields):
        if not self._ignore_urlbase:
            url_base = fields.optional("URLBase")
            if url_base is not None:
                if is_absolute_url(url_base):
                    self._log.debug("Device URLBase %s", url_base)
                    return url_base
                self._log.warning(
                    "Malformed URLBase %r, building it from the device location %s",
                    url_base, self.location
                )
        # If no URL Base is given, the UPnP specification says: "the base
        # URL is the URL from which the device description was retrieved"
        return derive_url_base(self.location)

    def get_validity_time(self):
        """
        Milliseconds left before this device should be considered outdated.
        Negative once the device has missed its re-advertisement.
        """
        with self._validity_lock:
            elapsed = _now_millis() - self.creation_time
            return self.validity_duration - elapsed

    def reset_validity_time(self, new_max_age):
        """
        Restart the validity countdown with a fresh max-age, in seconds.
        """
        validity_duration = _max_age_millis(new_max_age)
        with self._validity_lock:
            self.validity_duration = validity_duration
            self.creation_time = _now_millis()

    @property
    def is_expired(self):
        return self.get_validity_time() < 0

    @property
    def description_text(self):
        """
        The raw description document, fetched again from `location` on first
        access. `None` if it can't be retrieved.
        """
        if self._description_text is None:
            try:
                resp = requests.get(
                    self.location,
                    timeout=HTTP_TIMEOUT,
                    auth=self.http_auth,
                    headers=self.http_headers,
                )
                resp.raise_for_status()
            except requests.exceptions.RequestException as exc:
                self._log.warning(
                    "Unable to retrieve device description %s: %s", self.location, exc
                )
                return None
            self._description_text = resp.text
        return self._description_text
