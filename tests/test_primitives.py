"""
Tests for primitive models and draw commands.
"""

import pytest
from pydantic import ValidationError

from models import BLACK, WHITE, Color, DrawImage, DrawText, Point2D


class TestColor:

    def test_tuples(self):
        color = Color(r=1, g=2, b=3)
        assert color.as_tuple == (1, 2, 3, 255)
        assert color.as_rgb_tuple == (1, 2, 3)

    @pytest.mark.parametrize("value", [-1, 256])
    def test_out_of_range(self, value):
        with pytest.raises(ValidationError):
            Color(r=value, g=0, b=0)

    def test_constants(self):
        assert WHITE.as_rgb_tuple == (255, 255, 255)
        assert BLACK.as_rgb_tuple == (0, 0, 0)


class TestPoint2D:

    def test_frozen(self):
        point = Point2D(x=1.0, y=2.0)
        with pytest.raises(ValidationError):
            point.x = 5.0


class TestDrawCommands:

    def test_image_defaults_to_natural_size(self):
        cmd = DrawImage(sprite='enemy', x=0, y=0)
        assert cmd.kind == 'image'
        assert cmd.width is None and cmd.height is None

    def test_text_defaults(self):
        cmd = DrawText(text="Lives: ", x=5, y=60)
        assert cmd.kind == 'text'
        assert cmd.size == 30
        assert cmd.bold is True
        assert cmd.color == WHITE
