"""wolgate: Wake-on-LAN magic packets over UDP broadcast, via CLI or HTTP."""

__version__ = "0.1.0"
