"""xdgmeta - freedesktop.org application metadata: desktop entries, icons and XDG dirs."""

__app_name__ = "xdgmeta"
__version__ = "1.0.0"
