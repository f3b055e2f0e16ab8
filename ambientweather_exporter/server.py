import logging
import re
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import parse_qs, urlsplit

from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

logger = logging.getLogger(__name__)

REPORT_PREFIX = "/data/report/"
PASSKEY_MASK = "******"

_PASSKEY_RE = re.compile(r"((?:^|[?&/])PASSKEY=)[^&\s\"]*")


def redact_passkey(path):
    return _PASSKEY_RE.sub(r"\g<1>" + PASSKEY_MASK, path)


def parse_report_query(raw):
    """Decode a report query into name -> list of values.

    The station sends the query straight after the path, with or without a
    leading ``?``. Anything that does not decode cleanly is logged and the
    decodable part is used.
    """
    query = raw.lstrip("?&")
    try:
        return parse_qs(query, keep_blank_values=True, strict_parsing=True)
    except ValueError as e:
        logger.warning("Failed to parse weather observation from request url: %s", e)
        return parse_qs(query, keep_blank_values=True)


class ExporterHandler(BaseHTTPRequestHandler):
    # set by make_handler()
    translator = None
    registry = None

    def do_GET(self):
        path = urlsplit(self.path).path
        if path == "/metrics":
            output = generate_latest(self.registry)
            self.send_response(200)
            self.send_header("Content-Type", CONTENT_TYPE_LATEST)
            self.send_header("Content-Length", str(len(output)))
            self.end_headers()
            self.wfile.write(output)
        else:
            # anything else is a data push from the station
            self.handle_report()

    def do_POST(self):
        # the station only sends GETs, drain the body and treat it the same
        length = int(self.headers.get("Content-Length", 0) or 0)
        if length:
            self.rfile.read(length)
        self.handle_report()

    def handle_report(self):
        if not self.path.startswith(REPORT_PREFIX):
            self.send_response(404)
            self.send_header("Content-Length", "0")
            self.end_headers()
            return

        remote_address = self.client_address[0]
        logger.debug(
            "sample submitted by remote_address %s: %s", remote_address, redact_passkey(self.path)
        )

        # respond before translating, the station does not wait on us
        self.send_response(204)
        self.end_headers()

        fields = parse_report_query(self.path[len(REPORT_PREFIX):])
        self.translator.translate(remote_address, fields)

    def log_message(self, fmt, *args):
        # access lines carry the raw request path
        logger.debug("%s - %s", self.address_string(), redact_passkey(fmt % args))


def make_handler(translator, registry):
    return type(
        "BoundExporterHandler",
        (ExporterHandler,),
        {"translator": translator, "registry": registry},
    )


def make_server(port, translator, registry, host=""):
    return ThreadingHTTPServer((host, port), make_handler(translator, registry))


def run(port, translator, registry):
    server = make_server(port, translator, registry)
    logger.info("Starting ambientweather exporter on :%d", port)
    logger.info("   - data pushes: %s...", REPORT_PREFIX)
    logger.info("   - metrics scrape: /metrics")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("Shutting down")
    finally:
        server.server_close()
