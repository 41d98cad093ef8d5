RED = 0xFFFF0000
GREEN = 0xFF00FF00
BLUE = 0xFF0000FF
WHITE = 0xFFFFFFFF


class DictHandle:
    """Minimal PixelHandle backed by a dict, for testing non-Pillow sources."""

    def __init__(self, width, height, fill=0):
        self.width = width
        self.height = height
        self.writes = 0
        self._data = {(x, y): fill for y in range(max(height, 0)) for x in range(max(width, 0))}

    def get_argb(self, x, y):
        return self._data[(x, y)]

    def set_argb(self, x, y, value):
        self.writes += 1
        self._data[(x, y)] = value
