# gameclock/common - shared, Kivy-independent helpers
#
# Configuration parsing used by both core/ consumers and gui/ wiring.
