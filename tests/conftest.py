"""
Shared fixtures for ChatLens tests
"""

import pytest

from chatlens.parser import parse


SCENARIO_CHAT = """[01.01.23, 09:00] Alice: merhaba
[01.01.23, 09:05] Bob: selam canım ❤️
[01.01.23, 09:06] Alice: haha çok iyi"""

SAMPLE_CHAT = """[01.01.23, 09:00:00] Alice: merhaba
[01.01.23, 09:05:00] Bob: selam canım ❤️
[01.01.23, 09:06:00] Alice: haha çok iyi 😂
[01.01.23, 09:07:00] Alice: bugün trafikte kaldım
bu yüzden geç kaldım
[01.01.23, 23:30:00] Bob: özür dilerim aşkım, uyuyordum 😂
[02.01.23, 10:00:00] Alice: \u200egörüntü dahil edilmedi
[02.01.23, 10:02:00] Bob: pizza yiyelim mi?
[03.01.23, 12:00:00] Alice: Bob added Carol"""


@pytest.fixture
def scenario_text():
    return SCENARIO_CHAT


@pytest.fixture
def sample_text():
    return SAMPLE_CHAT


@pytest.fixture
def sample_df():
    return parse(SAMPLE_CHAT)
