"""
Minimal XPath query context over an lxml tree.

The device builder only needs four things from a document: a string value, a
number (for `count()` expressions), an existence test that hands back the
matching node, and a way to scope further queries beneath that node.
"""
from lxml import etree

from .errors import InvalidDocument, PathNotFound, QueryError


def _strip_namespaces(root):
    for elem in root.iter():
        # Comments and processing instructions have a callable tag.
        if not isinstance(elem.tag, str):
            continue
        elem.tag = etree.QName(elem).localname
    etree.cleanup_namespaces(root)
    return root


def parse_document(data):
    """
    Parse a description document and return its root element with all
    namespaces removed, so plain paths like `device/serviceList` match.
    """
    # Text has already been decoded, so any encoding it declares no longer
    # applies to the bytes handed to the parser.
    encoding = None
    if isinstance(data, str):
        data = data.encode("utf-8")
        encoding = "utf-8"
    parser = etree.XMLParser(
        encoding=encoding,
        resolve_entities=False,
        no_network=True,
        huge_tree=False,
        remove_comments=True,
        remove_pis=True,
    )
    try:
        root = etree.fromstring(data, parser=parser)
    except etree.XMLSyntaxError as exc:
        raise InvalidDocument("Unable to parse device description: %s" % exc) from exc
    if root is None:
        raise InvalidDocument("Device description is empty")
    return _strip_namespaces(root)


class XPathContext(object):
    """
    Query context anchored at a single element. All paths are evaluated
    relative to that element.
    """

    def __init__(self, node):
        self.node = node

    def __repr__(self):
        return "<XPathContext %r>" % (self.node.tag,)

    @classmethod
    def from_document(cls, data):
        return cls(parse_document(data))

    def _evaluate(self, path):
        try:
            return self.node.xpath(path)
        except etree.XPathError as exc:
            raise QueryError("Invalid path %r: %s" % (path, exc)) from exc

    def get_string(self, path):
        result = self._evaluate(path)
        if isinstance(result, list):
            if not result:
                raise PathNotFound(path)
            result = result[0]
            if etree.iselement(result):
                result = "".join(result.itertext())
        elif isinstance(result, bool):
            result = "true" if result else "false"
        elif isinstance(result, float):
            result = str(int(result)) if result.is_integer() else str(result)
        return str(result).strip()

    def get_number(self, path):
        result = self._evaluate(path)
        if isinstance(result, bool) or not isinstance(result, float):
            raise QueryError("Path %r does not evaluate to a number" % path)
        return result

    def get_pointer(self, path):
        result = self._evaluate(path)
        if not isinstance(result, list):
            raise QueryError("Path %r does not select nodes" % path)
        for node in result:
            if etree.iselement(node):
                return node
        raise PathNotFound(path)

    def get_relative_context(self, node):
        return XPathContext(node)
