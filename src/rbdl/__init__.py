"""rbdl — RepeaterBook repeater directory downloader.

Queries the RepeaterBook export API once, optionally keeps only on-air
repeaters, and saves the result as JSON or CSV.
"""

from rbdl.version import __version__

__all__: list[str] = ["__version__"]
