"""Ports (abstract interfaces) for external collaborators.

- BlobStoreProtocol: key/value persistence substrate
- MapWidgetProtocol: stateful map widget the controller drives
- TimeAuthorityProtocol: single source of timestamps
"""

from sgi.application.ports.blob_store import BlobStoreProtocol
from sgi.application.ports.map_widget import MapClickHandler, MapWidgetProtocol
from sgi.application.ports.time_authority import TimeAuthorityProtocol

__all__: list[str] = [
    "BlobStoreProtocol",
    "MapClickHandler",
    "MapWidgetProtocol",
    "TimeAuthorityProtocol",
]
