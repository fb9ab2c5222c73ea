"""Setups common fixtures for tests."""

import logging
from typing import Generator

import pytest
from pytest_mock import MockerFixture

import web


@pytest.fixture(autouse=True)
def reset_app_config(mocker: MockerFixture) -> None:
  """Restore the app config after each test, as serving changes it."""
  mocker.patch.dict(web.app.config)


@pytest.fixture(autouse=True)
def reset_pages_logger() -> Generator[None, None, None]:
  """Remove any handlers added to the pages logger during a test."""
  logger = logging.getLogger('pages')
  level = logger.level

  yield

  for h in logger.handlers[:]:
    logger.removeHandler(h)
    h.close()
  logger.setLevel(level)
