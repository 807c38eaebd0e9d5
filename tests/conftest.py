# -*- coding: utf-8 -*-
"""
PyTest 全局夹具：
- 让 tests 可从项目根部导入 spoilerlog / preprocess
- 提供样例 spoiler log
"""
import pathlib, sys
import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

SAMPLE_LOG = """\
Wind Waker Randomizer Version: 1.9.0
Seed: example

Starting island: Windfall Island

Playthrough:
Sphere 0
  Dragon Roost Cavern - Gohma Heart Container:
      Dragon Roost Cavern - Gohma Heart Container: Wind Waker

All item locations:
  Outset Island:
      Outset Island - Savage Labyrinth: Hero's Charm

Entrances:
  Dragon Roost Cavern: Forest Haven

Charts:
  Triangle Island Chart: Mother and Child Isles
"""

@pytest.fixture
def sample_text():
    return SAMPLE_LOG

@pytest.fixture
def sample_lines():
    return SAMPLE_LOG.splitlines()

@pytest.fixture
def multi_sphere_lines():
    return [
        "Playthrough:",
        "0:",
        "  Outset Island:",
        "      Outset Island - Great Fairy: Progressive Sword",
        "      Outset Island - Jabun's Cave: Progressive Shield",
        "  Windfall Island:",
        "      Windfall Island - Lenzo's House: Grappling Hook",
        "1:",
        "      Windfall Island - Chu Jelly Juice Shop: Boomerang",
        "  Dragon Roost Island:",
        "      Dragon Roost Island - Rito Aerie: Delivery Bag",
        "2:",
        "",
        "All item locations:",
        "Outset Island:",
        "    Great Fairy: Progressive Sword",
        "    Jabun's Cave: Progressive Shield",
        "Windfall Island:",
        "    Lenzo's House - Left Chest: Grappling Hook",
    ]
