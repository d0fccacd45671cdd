"""Header names recognized by the page-transition protocol."""

INERTIA = "X-Inertia"
INERTIA_VERSION = "X-Inertia-Version"
INERTIA_PARTIAL_DATA = "X-Inertia-Partial-Data"
INERTIA_PARTIAL_COMPONENT = "X-Inertia-Partial-Component"
# Reply-only: redirect target on an asset-version conflict
INERTIA_LOCATION = "X-Inertia-Location"

CONTENT_TYPE = "Content-Type"
VARY = "Vary"

JSON_CONTENT_TYPE = "application/json"
HTML_CONTENT_TYPE = "text/html; charset=utf-8"
