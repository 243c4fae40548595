import pytest
from ntnotes.conf import NtConf


@pytest.fixture
def conf(fs):
    """Settings for a collection in /notes on the fake filesystem, with the chooser and renderer turned off."""
    return NtConf(base_directory='/notes', renderer=False, chooser=False)
