"""Focus point detection and conversion to cover-fit focal fractions."""
from __future__ import annotations

from typing import Tuple

import numpy as np
import cv2
from PIL import Image
import logging

from .geometry import FocalPoint, clamp_unit, cover_fit_window


def detect_focus_point(img: Image.Image) -> Tuple[int, int]:
    """Detect a point of interest in an image.

    If a face is detected the centre of the first face is used.
    Otherwise a brightness weighted centroid is returned.
    """
    gray = np.array(img.convert("L"))
    face_cascade = cv2.CascadeClassifier(
        cv2.data.haarcascades + "haarcascade_frontalface_default.xml"
    )
    faces = face_cascade.detectMultiScale(gray, 1.1, 4)
    if len(faces) > 0:
        x, y, w, h = faces[0]
        return (int(x + w // 2), int(y + h // 2))
    brightness = gray.astype(float)
    y_indices, x_indices = np.indices(brightness.shape)
    total = brightness.sum()
    eps = 1e-6
    if total <= eps:
        h, w = gray.shape
        logging.warning("detect_focus_point: black frame, using centre")
        return (w // 2, h // 2)
    x = int((x_indices * brightness).sum() / total)
    y = int((y_indices * brightness).sum() / total)
    return (x, y)


def focal_from_point(
    image_size: Tuple[int, int],
    point: Tuple[int, int],
    target_size: Tuple[int, int],
) -> FocalPoint:
    """Return the focal fractions that centre *point* in the cover-fit window.

    ``image_size`` and ``target_size`` are ``(width, height)``. On an axis
    without excess the fraction stays at ``0.5``; otherwise it is clamped so
    the window stays inside the image.
    """
    img_w, img_h = image_size
    px, py = point
    window = cover_fit_window(img_w, img_h, target_size[0], target_size[1])
    excess_x = img_w - window.width
    excess_y = img_h - window.height
    fx = clamp_unit((px - window.width / 2) / excess_x) if excess_x > 0 else 0.5
    fy = clamp_unit((py - window.height / 2) / excess_y) if excess_y > 0 else 0.5
    return FocalPoint(fx, fy)


def auto_focal_point(img: Image.Image, target_size: Tuple[int, int]) -> FocalPoint:
    """Detect the point of interest of *img* and frame it for ``target_size``."""
    point = detect_focus_point(img)
    focal = focal_from_point(img.size, point, target_size)
    logging.debug("auto_focal_point: point=%s focal=(%.3f, %.3f)", point, focal.x, focal.y)
    return focal
