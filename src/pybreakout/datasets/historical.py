"""Curated cohorts for each supported prediction year.

Each cohort carries ``year - 1`` data (and the ``year - 2`` baseline where the
hitter had one) used to predict ``year``. Back-tested years include a short
note on what actually happened.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple

from pybreakout.models import PlayerRecord


logger = logging.getLogger(__name__)

_Row = Mapping[str, Any]

_COHORT_2023: Tuple[_Row, ...] = (
    {"name": "Yandy Díaz", "team": "TB", "age": 31, "pa": 545, "woba21": 0.336, "woba22": 0.324, "xwoba21": 0.348, "xwoba22": 0.377, "hardHitRate": 0.52, "barrelRate": 0.088, "kRate": 0.118, "position": "1B", "actualResult": "✅ AL batting champion .330 AVG, .903 OPS"},
    {"name": "Luis Robert Jr.", "team": "CWS", "age": 25, "pa": 492, "woba21": 0.316, "woba22": 0.303, "xwoba21": 0.342, "xwoba22": 0.350, "hardHitRate": 0.51, "barrelRate": 0.095, "kRate": 0.287, "position": "OF", "actualResult": "✅ .857 OPS, 38 HR, All-Star"},
    {"name": "William Contreras", "team": "MIL", "age": 24, "pa": 595, "woba21": 0.315, "woba22": 0.334, "xwoba21": 0.328, "xwoba22": 0.370, "hardHitRate": 0.46, "barrelRate": 0.074, "kRate": 0.172, "position": "C", "actualResult": "✅ .849 OPS, elite offensive catcher"},
    {"name": "Corbin Carroll", "team": "ARI", "age": 22, "pa": 610, "woba21": None, "woba22": None, "xwoba21": None, "xwoba22": 0.365, "hardHitRate": 0.44, "barrelRate": 0.074, "kRate": 0.225, "position": "OF", "actualResult": "✅ NL ROY, 25 HR, 54 SB, Gold Glove"},
    {"name": "Jarren Duran", "team": "BOS", "age": 26, "pa": 350, "woba21": 0.270, "woba22": 0.287, "xwoba21": 0.285, "xwoba22": 0.315, "hardHitRate": 0.42, "barrelRate": 0.061, "kRate": 0.268, "position": "OF", "actualResult": "⚠️ .283/.330/.444 solid but not star"},
    {"name": "Julio Rodríguez", "team": "SEA", "age": 22, "pa": 628, "woba21": None, "woba22": 0.349, "xwoba21": None, "xwoba22": 0.358, "hardHitRate": 0.47, "barrelRate": 0.083, "kRate": 0.255, "position": "OF", "actualResult": "✅ .275/.331/.487, continued star"},
    {"name": "Adley Rutschman", "team": "BAL", "age": 25, "pa": 591, "woba21": None, "woba22": 0.352, "xwoba21": None, "xwoba22": 0.365, "hardHitRate": 0.45, "barrelRate": 0.071, "kRate": 0.178, "position": "C", "actualResult": "✅ All-Star, elite defense"},
    {"name": "Bo Bichette", "team": "TOR", "age": 25, "pa": 582, "woba21": 0.333, "woba22": 0.310, "xwoba21": 0.338, "xwoba22": 0.335, "hardHitRate": 0.43, "barrelRate": 0.062, "kRate": 0.172, "position": "SS", "actualResult": "⚠️ .306/.339/.446 consistent"},
    {"name": "Jeremy Peña", "team": "HOU", "age": 25, "pa": 550, "woba21": None, "woba22": 0.320, "xwoba21": None, "xwoba22": 0.332, "hardHitRate": 0.41, "barrelRate": 0.058, "kRate": 0.212, "position": "SS", "actualResult": "❌ .254/.289/.392 regression"},
    {"name": "Esteury Ruiz", "team": "OAK", "age": 24, "pa": 520, "woba21": None, "woba22": None, "xwoba21": None, "xwoba22": 0.305, "hardHitRate": 0.35, "barrelRate": 0.032, "kRate": 0.285, "position": "OF", "actualResult": "⚠️ 67 SB but .237 AVG"},
)

_COHORT_2024: Tuple[_Row, ...] = (
    {"name": "Bobby Witt Jr.", "team": "KC", "age": 23, "pa": 671, "woba22": 0.318, "woba23": 0.354, "xwoba22": 0.335, "xwoba23": 0.356, "hardHitRate": 0.46, "barrelRate": 0.079, "kRate": 0.198, "position": "SS", "actualResult": "✅ AL MVP runner-up, .332/.380/.588, 32 HR, 31 SB"},
    {"name": "Jarren Duran", "team": "BOS", "age": 27, "pa": 511, "woba22": 0.287, "woba23": 0.312, "xwoba22": 0.305, "xwoba23": 0.343, "hardHitRate": 0.43, "barrelRate": 0.068, "kRate": 0.221, "position": "OF", "actualResult": "✅ All-Star, Silver Slugger, .285/.342/.492"},
    {"name": "Jackson Merrill", "team": "SD", "age": 21, "pa": 514, "woba22": None, "woba23": None, "xwoba22": None, "xwoba23": 0.335, "hardHitRate": 0.47, "barrelRate": 0.071, "kRate": 0.215, "position": "OF", "actualResult": "✅ 3rd in NL ROY, .292/.326/.500"},
    {"name": "Elly De La Cruz", "team": "CIN", "age": 22, "pa": 576, "woba22": None, "woba23": 0.339, "xwoba22": None, "xwoba23": 0.357, "hardHitRate": 0.49, "barrelRate": 0.092, "kRate": 0.333, "position": "SS", "actualResult": "✅ .259/.342/.478, 25 HR, 67 SB"},
    {"name": "Gunnar Henderson", "team": "BAL", "age": 22, "pa": 633, "woba22": None, "woba23": 0.358, "xwoba22": None, "xwoba23": 0.365, "hardHitRate": 0.48, "barrelRate": 0.088, "kRate": 0.215, "position": "SS", "actualResult": "✅ .281/.365/.528, 37 HR"},
    {"name": "CJ Abrams", "team": "WSH", "age": 23, "pa": 590, "woba22": 0.310, "woba23": 0.331, "xwoba22": 0.322, "xwoba23": 0.343, "hardHitRate": 0.41, "barrelRate": 0.055, "kRate": 0.203, "position": "SS", "actualResult": "✅ .246/.314/.433, 20 HR, 31 SB"},
    {"name": "Wyatt Langford", "team": "TEX", "age": 22, "pa": 388, "woba22": None, "woba23": None, "xwoba22": None, "xwoba23": 0.330, "hardHitRate": 0.45, "barrelRate": 0.070, "kRate": 0.235, "position": "OF", "actualResult": "❌ .253/.315/.371 struggled"},
    {"name": "Jackson Chourio", "team": "MIL", "age": 20, "pa": 530, "woba22": None, "woba23": None, "xwoba22": None, "xwoba23": 0.328, "hardHitRate": 0.46, "barrelRate": 0.075, "kRate": 0.245, "position": "OF", "actualResult": "⚠️ .275/.327/.464 developing"},
    {"name": "Josh Jung", "team": "TEX", "age": 26, "pa": 420, "woba22": None, "woba23": 0.355, "xwoba22": None, "xwoba23": 0.368, "hardHitRate": 0.50, "barrelRate": 0.095, "kRate": 0.214, "position": "3B", "actualResult": "⚠️ Injured, .264/.323/.428"},
    {"name": "Corbin Carroll", "team": "ARI", "age": 23, "pa": 610, "woba22": None, "woba23": 0.384, "xwoba22": None, "xwoba23": 0.371, "hardHitRate": 0.44, "barrelRate": 0.074, "kRate": 0.225, "position": "OF", "actualResult": "❌ .231/.321/.376 regression"},
)

_COHORT_2025: Tuple[_Row, ...] = (
    {"name": "Jackson Holliday", "team": "BAL", "age": 21, "pa": 187, "woba23": None, "woba24": 0.265, "xwoba23": None, "xwoba24": 0.348, "hardHitRate": 0.46, "barrelRate": 0.080, "kRate": 0.305, "position": "SS", "actualResult": "🔄 2025 just ended - results pending"},
    {"name": "Triston Casas", "team": "BOS", "age": 25, "pa": 220, "woba23": 0.355, "woba24": 0.305, "xwoba23": 0.370, "xwoba24": 0.382, "hardHitRate": 0.54, "barrelRate": 0.135, "kRate": 0.235, "position": "1B", "actualResult": "🔄 2025 just ended - results pending"},
    {"name": "James Wood", "team": "WSH", "age": 21, "pa": 362, "woba23": None, "woba24": 0.333, "xwoba23": None, "xwoba24": 0.368, "hardHitRate": 0.52, "barrelRate": 0.110, "kRate": 0.261, "position": "OF", "actualResult": "🔄 2025 just ended - results pending"},
    {"name": "Junior Caminero", "team": "TB", "age": 21, "pa": 351, "woba23": 0.312, "woba24": 0.318, "xwoba23": 0.335, "xwoba24": 0.364, "hardHitRate": 0.51, "barrelRate": 0.098, "kRate": 0.237, "position": "3B", "actualResult": "🔄 2025 just ended - results pending"},
    {"name": "Colton Cowser", "team": "BAL", "age": 24, "pa": 386, "woba23": 0.318, "woba24": 0.316, "xwoba23": 0.330, "xwoba24": 0.360, "hardHitRate": 0.50, "barrelRate": 0.112, "kRate": 0.248, "position": "OF", "actualResult": "🔄 2025 just ended - results pending"},
    {"name": "Kyle Manzardo", "team": "CLE", "age": 23, "pa": 264, "woba23": None, "woba24": 0.298, "xwoba23": None, "xwoba24": 0.352, "hardHitRate": 0.48, "barrelRate": 0.093, "kRate": 0.225, "position": "1B", "actualResult": "🔄 2025 just ended - results pending"},
    {"name": "Wyatt Langford", "team": "TEX", "age": 23, "pa": 388, "woba23": None, "woba24": 0.303, "xwoba23": None, "xwoba24": 0.343, "hardHitRate": 0.46, "barrelRate": 0.082, "kRate": 0.220, "position": "OF", "actualResult": "🔄 2025 just ended - results pending"},
    {"name": "Noelvi Marte", "team": "CIN", "age": 22, "pa": 296, "woba23": 0.288, "woba24": 0.295, "xwoba23": 0.302, "xwoba24": 0.339, "hardHitRate": 0.43, "barrelRate": 0.075, "kRate": 0.239, "position": "3B", "actualResult": "🔄 2025 just ended - results pending"},
    {"name": "Marco Luciano", "team": "SF", "age": 22, "pa": 320, "woba23": 0.298, "woba24": 0.275, "xwoba23": 0.315, "xwoba24": 0.338, "hardHitRate": 0.47, "barrelRate": 0.083, "kRate": 0.280, "position": "SS", "actualResult": "🔄 2025 just ended - results pending"},
    {"name": "Jordan Walker", "team": "STL", "age": 22, "pa": 468, "woba23": 0.310, "woba24": 0.285, "xwoba23": 0.325, "xwoba24": 0.342, "hardHitRate": 0.46, "barrelRate": 0.078, "kRate": 0.265, "position": "OF", "actualResult": "🔄 2025 just ended - results pending"},
)

_COHORT_2026: Tuple[_Row, ...] = (
    {"name": "Jackson Chourio", "team": "MIL", "age": 21, "pa": 530, "woba24": 0.311, "woba25": 0.297, "xwoba24": 0.328, "xwoba25": 0.342, "hardHitRate": 0.49, "barrelRate": 0.081, "kRate": 0.233, "position": "OF"},
    {"name": "Jackson Merrill", "team": "SD", "age": 22, "pa": 514, "woba24": None, "woba25": 0.314, "xwoba24": None, "xwoba25": 0.338, "hardHitRate": 0.47, "barrelRate": 0.071, "kRate": 0.215, "position": "OF"},
    {"name": "Colt Keith", "team": "DET", "age": 23, "pa": 475, "woba24": None, "woba25": 0.308, "xwoba24": None, "xwoba25": 0.351, "hardHitRate": 0.44, "barrelRate": 0.065, "kRate": 0.194, "position": "3B"},
    {"name": "Colton Cowser", "team": "BAL", "age": 25, "pa": 386, "woba24": 0.318, "woba25": 0.316, "xwoba24": 0.330, "xwoba25": 0.360, "hardHitRate": 0.50, "barrelRate": 0.112, "kRate": 0.248, "position": "OF"},
    {"name": "Victor Scott II", "team": "STL", "age": 24, "pa": 401, "woba24": None, "woba25": 0.299, "xwoba24": None, "xwoba25": 0.318, "hardHitRate": 0.38, "barrelRate": 0.044, "kRate": 0.279, "position": "OF"},
    {"name": "Noelvi Marte", "team": "CIN", "age": 23, "pa": 296, "woba24": 0.288, "woba25": 0.295, "xwoba24": 0.302, "xwoba25": 0.339, "hardHitRate": 0.43, "barrelRate": 0.075, "kRate": 0.239, "position": "3B"},
    {"name": "Wyatt Langford", "team": "TEX", "age": 24, "pa": 388, "woba24": None, "woba25": 0.303, "xwoba24": None, "xwoba25": 0.343, "hardHitRate": 0.46, "barrelRate": 0.082, "kRate": 0.220, "position": "OF"},
    {"name": "Kyle Manzardo", "team": "CLE", "age": 24, "pa": 264, "woba24": None, "woba25": 0.298, "xwoba24": None, "xwoba25": 0.352, "hardHitRate": 0.48, "barrelRate": 0.093, "kRate": 0.225, "position": "1B"},
    {"name": "Junior Caminero", "team": "TB", "age": 22, "pa": 351, "woba24": 0.312, "woba25": 0.318, "xwoba24": 0.335, "xwoba25": 0.364, "hardHitRate": 0.51, "barrelRate": 0.098, "kRate": 0.237, "position": "3B"},
    {"name": "Joey Wiemer", "team": "MIL", "age": 26, "pa": 382, "woba24": 0.290, "woba25": 0.265, "xwoba24": 0.305, "xwoba25": 0.328, "hardHitRate": 0.44, "barrelRate": 0.072, "kRate": 0.302, "position": "OF"},
    {"name": "Masyn Winn", "team": "STL", "age": 23, "pa": 554, "woba24": None, "woba25": 0.318, "xwoba24": None, "xwoba25": 0.326, "hardHitRate": 0.40, "barrelRate": 0.047, "kRate": 0.173, "position": "SS"},
    {"name": "Pete Crow-Armstrong", "team": "CHC", "age": 23, "pa": 351, "woba24": None, "woba25": 0.304, "xwoba24": None, "xwoba25": 0.319, "hardHitRate": 0.39, "barrelRate": 0.058, "kRate": 0.222, "position": "OF"},
    {"name": "Iván Herrera", "team": "STL", "age": 24, "pa": 271, "woba24": 0.305, "woba25": 0.289, "xwoba24": 0.320, "xwoba25": 0.345, "hardHitRate": 0.45, "barrelRate": 0.069, "kRate": 0.196, "position": "C"},
    {"name": "Brooks Lee", "team": "MIN", "age": 24, "pa": 380, "woba24": None, "woba25": 0.295, "xwoba24": None, "xwoba25": 0.332, "hardHitRate": 0.43, "barrelRate": 0.065, "kRate": 0.210, "position": "SS"},
    {"name": "James Wood", "team": "WSH", "age": 22, "pa": 362, "woba24": None, "woba25": 0.333, "xwoba24": None, "xwoba25": 0.368, "hardHitRate": 0.52, "barrelRate": 0.110, "kRate": 0.261, "position": "OF"},
    {"name": "Spencer Jones", "team": "NYY", "age": 24, "pa": 100, "woba24": None, "woba25": 0.310, "xwoba24": None, "xwoba25": 0.355, "hardHitRate": 0.50, "barrelRate": 0.095, "kRate": 0.285, "position": "OF"},
    {"name": "Roman Anthony", "team": "BOS", "age": 21, "pa": 0, "woba24": None, "woba25": None, "xwoba24": None, "xwoba25": 0.380, "hardHitRate": 0.51, "barrelRate": 0.105, "kRate": 0.218, "position": "OF"},
    {"name": "Jackson Holliday", "team": "BAL", "age": 22, "pa": 187, "woba24": None, "woba25": 0.265, "xwoba24": None, "xwoba25": 0.348, "hardHitRate": 0.46, "barrelRate": 0.080, "kRate": 0.305, "position": "SS"},
    {"name": "Dylan Crews", "team": "WSH", "age": 23, "pa": 245, "woba24": None, "woba25": 0.295, "xwoba24": None, "xwoba25": 0.330, "hardHitRate": 0.44, "barrelRate": 0.070, "kRate": 0.240, "position": "OF"},
    {"name": "Jacob Wilson", "team": "OAK", "age": 23, "pa": 150, "woba24": None, "woba25": 0.305, "xwoba24": None, "xwoba25": 0.328, "hardHitRate": 0.41, "barrelRate": 0.055, "kRate": 0.175, "position": "SS"},
    {"name": "Ezequiel Tovar", "team": "COL", "age": 24, "pa": 580, "woba24": 0.307, "woba25": 0.295, "xwoba24": 0.318, "xwoba25": 0.334, "hardHitRate": 0.43, "barrelRate": 0.067, "kRate": 0.220, "position": "SS"},
    {"name": "Owen Miller", "team": "OAK", "age": 27, "pa": 410, "woba24": 0.300, "woba25": 0.285, "xwoba24": 0.312, "xwoba25": 0.325, "hardHitRate": 0.40, "barrelRate": 0.055, "kRate": 0.185, "position": "2B"},
    {"name": "Henry Davis", "team": "PIT", "age": 25, "pa": 285, "woba24": 0.295, "woba25": 0.288, "xwoba24": 0.308, "xwoba25": 0.342, "hardHitRate": 0.46, "barrelRate": 0.078, "kRate": 0.255, "position": "C"},
    {"name": "Max Clark", "team": "DET", "age": 20, "pa": 0, "woba24": None, "woba25": None, "xwoba24": None, "xwoba25": 0.365, "hardHitRate": 0.48, "barrelRate": 0.085, "kRate": 0.220, "position": "OF"},
    {"name": "Orelvis Martinez", "team": "TOR", "age": 23, "pa": 200, "woba24": None, "woba25": 0.280, "xwoba24": None, "xwoba25": 0.345, "hardHitRate": 0.50, "barrelRate": 0.100, "kRate": 0.310, "position": "3B"},
    {"name": "Jonah Bride", "team": "OAK", "age": 28, "pa": 320, "woba24": 0.310, "woba25": 0.298, "xwoba24": 0.322, "xwoba25": 0.340, "hardHitRate": 0.44, "barrelRate": 0.068, "kRate": 0.192, "position": "3B"},
    {"name": "Endy Rodriguez", "team": "PIT", "age": 24, "pa": 280, "woba24": None, "woba25": 0.290, "xwoba24": None, "xwoba25": 0.335, "hardHitRate": 0.45, "barrelRate": 0.075, "kRate": 0.225, "position": "C"},
    {"name": "Tyler Soderstrom", "team": "OAK", "age": 23, "pa": 330, "woba24": None, "woba25": 0.285, "xwoba24": None, "xwoba25": 0.340, "hardHitRate": 0.47, "barrelRate": 0.082, "kRate": 0.248, "position": "C/OF"},
    {"name": "Triston Casas", "team": "BOS", "age": 26, "pa": 220, "woba24": 0.355, "woba25": 0.305, "xwoba24": 0.370, "xwoba25": 0.382, "hardHitRate": 0.54, "barrelRate": 0.135, "kRate": 0.235, "position": "1B"},
    {"name": "Gavin Cross", "team": "KC", "age": 24, "pa": 285, "woba24": None, "woba25": 0.299, "xwoba24": None, "xwoba25": 0.328, "hardHitRate": 0.43, "barrelRate": 0.063, "kRate": 0.238, "position": "OF"},
    {"name": "Drew Gilbert", "team": "HOU", "age": 25, "pa": 310, "woba24": None, "woba25": 0.301, "xwoba24": None, "xwoba25": 0.322, "hardHitRate": 0.41, "barrelRate": 0.055, "kRate": 0.210, "position": "OF"},
    {"name": "Zach Neto", "team": "LAA", "age": 25, "pa": 502, "woba24": 0.301, "woba25": 0.308, "xwoba24": 0.315, "xwoba25": 0.338, "hardHitRate": 0.44, "barrelRate": 0.070, "kRate": 0.228, "position": "SS"},
    {"name": "Jonatan Clase", "team": "SEA", "age": 23, "pa": 288, "woba24": None, "woba25": 0.295, "xwoba24": None, "xwoba25": 0.315, "hardHitRate": 0.40, "barrelRate": 0.050, "kRate": 0.248, "position": "OF"},
    {"name": "Anthony Volpe", "team": "NYY", "age": 24, "pa": 604, "woba24": 0.295, "woba25": 0.301, "xwoba24": 0.308, "xwoba25": 0.322, "hardHitRate": 0.41, "barrelRate": 0.056, "kRate": 0.225, "position": "SS"},
    {"name": "Jordan Walker", "team": "STL", "age": 23, "pa": 468, "woba24": 0.310, "woba25": 0.285, "xwoba24": 0.325, "xwoba25": 0.342, "hardHitRate": 0.46, "barrelRate": 0.078, "kRate": 0.265, "position": "OF"},
    {"name": "Sal Frelick", "team": "MIL", "age": 25, "pa": 504, "woba24": 0.315, "woba25": 0.299, "xwoba24": 0.328, "xwoba25": 0.320, "hardHitRate": 0.40, "barrelRate": 0.052, "kRate": 0.188, "position": "OF"},
    {"name": "Adael Amador", "team": "COL", "age": 22, "pa": 298, "woba24": None, "woba25": 0.292, "xwoba24": None, "xwoba25": 0.325, "hardHitRate": 0.41, "barrelRate": 0.058, "kRate": 0.215, "position": "SS"},
    {"name": "Samuel Basallo", "team": "BAL", "age": 20, "pa": 0, "woba24": None, "woba25": None, "xwoba24": None, "xwoba25": 0.375, "hardHitRate": 0.53, "barrelRate": 0.120, "kRate": 0.230, "position": "C"},
    {"name": "Marco Luciano", "team": "SF", "age": 23, "pa": 320, "woba24": 0.298, "woba25": 0.275, "xwoba24": 0.315, "xwoba25": 0.338, "hardHitRate": 0.47, "barrelRate": 0.083, "kRate": 0.280, "position": "SS/OF"},
    {"name": "Emmanuel Rodriguez", "team": "MIN", "age": 22, "pa": 280, "woba24": None, "woba25": 0.305, "xwoba24": None, "xwoba25": 0.340, "hardHitRate": 0.46, "barrelRate": 0.078, "kRate": 0.268, "position": "OF"},
    {"name": "Harry Ford", "team": "SEA", "age": 22, "pa": 120, "woba24": None, "woba25": 0.288, "xwoba24": None, "xwoba25": 0.332, "hardHitRate": 0.43, "barrelRate": 0.066, "kRate": 0.228, "position": "C"},
    {"name": "Jorel Ortega", "team": "CHC", "age": 24, "pa": 200, "woba24": None, "woba25": 0.295, "xwoba24": None, "xwoba25": 0.325, "hardHitRate": 0.42, "barrelRate": 0.060, "kRate": 0.212, "position": "OF"},
    {"name": "Jace Jung", "team": "DET", "age": 25, "pa": 310, "woba24": None, "woba25": 0.301, "xwoba24": None, "xwoba25": 0.340, "hardHitRate": 0.46, "barrelRate": 0.080, "kRate": 0.232, "position": "2B"},
    {"name": "Brice Turang", "team": "MIL", "age": 25, "pa": 542, "woba24": 0.302, "woba25": 0.298, "xwoba24": 0.310, "xwoba25": 0.325, "hardHitRate": 0.38, "barrelRate": 0.043, "kRate": 0.182, "position": "2B"},
    {"name": "Logan O'Hoppe", "team": "LAA", "age": 25, "pa": 448, "woba24": 0.320, "woba25": 0.315, "xwoba24": 0.332, "xwoba25": 0.348, "hardHitRate": 0.47, "barrelRate": 0.085, "kRate": 0.228, "position": "C"},
)

HISTORICAL_COHORTS: Mapping[int, Tuple[_Row, ...]] = MappingProxyType(
    {
        2023: _COHORT_2023,
        2024: _COHORT_2024,
        2025: _COHORT_2025,
        2026: _COHORT_2026,
    }
)


def available_years() -> List[int]:
    return sorted(HISTORICAL_COHORTS)


def historical_rows(year: int) -> List[Dict[str, Any]]:
    """Return fresh copies of the raw rows for ``year``, raising KeyError if missing."""

    if year not in HISTORICAL_COHORTS:
        raise KeyError(f"No curated cohort for prediction year {year}")
    return [dict(row) for row in HISTORICAL_COHORTS[year]]


def load_historical(year: int) -> List[PlayerRecord]:
    records = [PlayerRecord.model_validate(row) for row in historical_rows(year)]
    logger.debug("Loaded %d curated records for %d", len(records), year)
    return records
