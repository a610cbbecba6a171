import logging
import os
import random

import numpy as np
import pytest

from framer import FitMode, Framer, Origin


@pytest.fixture(autouse=True)
def seed_rng() -> None:
    random.seed(0)
    np.random.seed(0)
    os.environ["PYTHONHASHSEED"] = "0"


@pytest.fixture(autouse=True)
def reset_framer_logger():
    yield
    logger = logging.getLogger("framer")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture()
def portrait_fit() -> Framer:
    """720x1280 picture shown in a 360x480 frame, bottom-left origin."""
    return Framer((720, 1280), (360, 480), Origin.BOTTOM_LEFT, FitMode.ASPECT_FIT)


@pytest.fixture()
def portrait_fill() -> Framer:
    return Framer((720, 1280), (360, 480), Origin.BOTTOM_LEFT, FitMode.ASPECT_FILL)
