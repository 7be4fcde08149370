"""
KiCad Bootstrap
--------------------------------------------------

Installs the KiCad CAD suite on Debian/Ubuntu systems through apt, adding the
KiCad PPA first when it is not already configured.

Version: 1.0.0
"""

__version__ = "1.0.0"
