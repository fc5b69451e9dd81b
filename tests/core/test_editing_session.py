"""Tests for the host-facing editing session."""

import numpy as np
import pytest
from PIL import Image as PILImage

from src.photo_inverter.core.contrast_controller import ContrastController, Mode
from src.photo_inverter.core.editing_session import EditingSession
from src.photo_inverter.core.image import Image
from src.photo_inverter.errors import EncodingFailedError, InvalidImageError


@pytest.fixture
def session(numpy_backend):
    return EditingSession(ContrastController(backend=numpy_backend))


@pytest.fixture
def gradient():
    ramp = np.linspace(40, 220, 16, dtype=np.float64).astype(np.uint8)
    pixels = np.empty((8, 16, 4), dtype=np.uint8)
    pixels[..., 0] = ramp
    pixels[..., 1] = ramp
    pixels[..., 2] = ramp
    pixels[..., 3] = 255
    return Image(pixels)


def test_session_never_resumes(session):
    assert session.can_handle(None) is False
    assert session.should_show_cancel_confirmation is False


def test_preview_requires_started_session(session):
    with pytest.raises(InvalidImageError):
        session.preview()
    with pytest.raises(InvalidImageError):
        session.finish()


def test_start_rejects_missing_image(session):
    with pytest.raises(InvalidImageError):
        session.start(None)
    assert not session.is_active


def test_preview_stretches_full_range(session, gradient):
    session.start(gradient)
    preview = session.preview()
    assert preview.pixels[..., :3].min() == 0
    assert preview.pixels[..., :3].max() == 255
    # Brightest input becomes darkest output.
    assert preview.pixels[0, -1, 0] == 0
    assert preview.pixels[0, 0, 0] == 255


def test_finish_without_destination_returns_image_and_record(session, gradient):
    session.start(gradient)
    output = session.finish()
    assert output.destination is None
    assert output.adjustment_data.payload() == {"inversion": True}
    np.testing.assert_array_equal(output.image.pixels, session.preview().pixels)


def test_finish_writes_jpeg_and_creates_directories(session, gradient, tmp_path):
    session.start(gradient)
    destination = tmp_path / "rendered" / "nested" / "output.jpg"
    output = session.finish(destination, quality=95)

    assert output.destination == destination
    assert destination.exists()
    with PILImage.open(destination) as written:
        assert written.format == "JPEG"
        assert written.size == (16, 8)


def test_finish_reports_encoding_failure(session, gradient, tmp_path):
    session.start(gradient)
    with pytest.raises(EncodingFailedError):
        session.finish(tmp_path / "output.not-a-format")


def test_cancel_drops_the_input(session, gradient):
    session.start(gradient)
    session.cancel()
    assert not session.is_active
    with pytest.raises(InvalidImageError):
        session.preview()


def test_manual_session_uses_controller_point(numpy_backend, gradient):
    controller = ContrastController(mode=Mode.MANUAL, backend=numpy_backend)
    controller.set_point(0.0, 1.0)
    session = EditingSession(controller)
    session.start(gradient)
    expected = 255 - gradient.pixels[..., :3]
    np.testing.assert_array_equal(session.preview().pixels[..., :3], expected)
