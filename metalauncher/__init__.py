"""metalauncher: application registry, launcher and liveness backend.

Subpackages:
    storage: Registry (apps.json) and global preferences (global.json)
    scanners: Installed-bundle discovery and process-table liveness
    signals: Latest status records from the signal bus
    launch: Opening apps through `open`
    utils: Constants, errors, path handling and the known-apps table
"""

__version__ = "0.1.0"
