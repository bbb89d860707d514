"""
Built-in transliteration tables.

These are used whenever the corresponding data table is missing or empty.
The Devanagari side is a pseudo-phonetic reading aid: digits after a vowel
sign mark the Burmese tone (1 creaky, 2 low, 3 high).
"""

from typing import Tuple

from ..models import GlyphRule, SpecialCase


# Base consonants: replacement is the primary reading, alternate the voiced one.
DEFAULT_CONSONANTS: Tuple[GlyphRule, ...] = (
    GlyphRule('က', 'क', 'ग', 'k'),
    GlyphRule('ခ', 'ख', 'ग', 'kh'),
    GlyphRule('ဂ', 'ग', '', 'g'),
    GlyphRule('ဃ', 'घ', '', 'gh'),
    GlyphRule('င', 'ङ', '', 'ng'),
    GlyphRule('စ', 'स', 'झ', 's'),
    GlyphRule('ဆ', 'स', 'झ', 's'),
    GlyphRule('ဇ', 'ज', '', 'j'),
    GlyphRule('ဈ', 'झ', '', 'jh'),
    GlyphRule('ည', 'ज्ञ', '', 'ñ'),
    GlyphRule('ဉ', 'ज्ञ', '', 'ñ'),
    GlyphRule('ဋ', 'ट', '', 'ṭ'),
    GlyphRule('ဌ', 'ठ', '', 'ṭh'),
    GlyphRule('ဍ', 'ड', '', 'ḍ'),
    GlyphRule('ဎ', 'ढ', '', 'ḍh'),
    GlyphRule('ဏ', 'न', '', 'ṇ'),
    GlyphRule('တ', 'त', 'द', 't'),
    GlyphRule('ထ', 'थ', 'द', 'th'),
    GlyphRule('ဒ', 'द', '', 'd'),
    GlyphRule('ဓ', 'ध', '', 'dh'),
    GlyphRule('န', 'न', '', 'n'),
    GlyphRule('ပ', 'प', 'ब', 'p'),
    GlyphRule('ဖ', 'फ', '', 'ph'),
    GlyphRule('ဗ', 'ब', '', 'b'),
    GlyphRule('ဘ', 'ब', '', 'bh'),
    GlyphRule('မ', 'म', '', 'm'),
    GlyphRule('ယ', 'य', 'र', 'y'),
    GlyphRule('ရ', 'य', 'र', 'r'),
    GlyphRule('လ', 'ल', '', 'l'),
    GlyphRule('ဝ', 'व', '', 'w'),
    GlyphRule('သ', 'थ', 'द', 'th'),
    GlyphRule('ဟ', 'ह', '', 'h'),
    GlyphRule('ဠ', 'ल', '', 'l'),
    GlyphRule('အ', 'अ', '', 'a'),
    GlyphRule('ဿ', 'स्स', '', 'ss'),
)

# Vowel signs, finals, tone marks, punctuation and stand-alone medial signs.
DEFAULT_VOWELS: Tuple[GlyphRule, ...] = (
    GlyphRule('ါ', 'ा2'),
    GlyphRule('ာ', 'ा2'),
    GlyphRule('ား', 'ा3'),
    GlyphRule('ိ', 'ि1'),
    GlyphRule('ီ', 'ि2'),
    GlyphRule('ီး', 'ि3'),
    GlyphRule('ု', 'ु1'),
    GlyphRule('ူ', 'ु2'),
    GlyphRule('ူး', 'ु3'),
    GlyphRule('ေ', 'े2'),
    GlyphRule('ေး', 'े3'),
    GlyphRule('ဲ', 'े³¹13'),
    GlyphRule('ော', 'ौ3'),
    GlyphRule('ော်', 'ौ2'),
    GlyphRule('ို', 'ो2'),
    GlyphRule('ို့', 'ो1'),
    GlyphRule('ိုး', 'ोए'),
    GlyphRule('ောင်', 'ौं2'),
    GlyphRule('ောင်း', 'ौं3'),
    GlyphRule('ောက်', 'ौ?1'),
    GlyphRule('ိုင်', 'ाइन2'),
    GlyphRule('ိုင်း', 'ाइन3'),
    GlyphRule('ိုက်', 'ाइ'),
    GlyphRule('င်', 'िन2'),
    GlyphRule('င်း', 'िन3'),
    GlyphRule('င့်', 'िन1'),
    GlyphRule('င်္', 'िं2'),
    GlyphRule('န်', 'ं12'),
    GlyphRule('န်း', 'ं13'),
    GlyphRule('မ်', 'ं22'),
    GlyphRule('မ်း', 'ं23'),
    GlyphRule('ံ', 'ं32'),
    GlyphRule('ံ့', 'ं31'),
    GlyphRule('က်', 'ेत'),
    GlyphRule('တ်', 'त1'),
    GlyphRule('ပ်', 'त2'),
    GlyphRule('ယ်', 'े³¹12'),
    GlyphRule('ည်', 'े³¹22'),
    GlyphRule('ုတ်', 'ोट'),
    GlyphRule('ုပ်', 'ोप'),
    GlyphRule('ုန်', 'ों12'),
    GlyphRule('ုံ', 'ों22'),
    GlyphRule('။', '॥'),
    GlyphRule('၊', '।'),
    GlyphRule('ျ', '्य'),
    GlyphRule('ြ', '्य'),
    GlyphRule('ှ', '्ह'),
    GlyphRule('ွ', '्व'),
)

# Consonant + medial clusters (ya-pin, ya-yit, ha-htoe, wa-hswe and wa+ha).
DEFAULT_MEDIALS: Tuple[GlyphRule, ...] = (
    GlyphRule('ကျ', 'च'), GlyphRule('ကြ', 'च'), GlyphRule('ကှ', 'क्ह'), GlyphRule('ကွ', 'क्व'), GlyphRule('ကွှ', 'क्हव'),
    GlyphRule('ချ', 'छ'), GlyphRule('ခြ', 'छ'), GlyphRule('ခှ', 'ख्ह'), GlyphRule('ခွ', 'ख्व'), GlyphRule('ခွှ', 'ख्हव'),
    GlyphRule('ဂျ', 'ज'), GlyphRule('ဂြ', 'ज'), GlyphRule('ဂှ', 'ग्ह'), GlyphRule('ဂွ', 'ग्व'), GlyphRule('ဂွှ', 'ग्हव'),
    GlyphRule('ငျ', 'ङ्य'), GlyphRule('ငြ', 'ज्ञ'), GlyphRule('ငှ', 'ङ्ह'), GlyphRule('ငွ', 'ङ्व'), GlyphRule('ငွှ', 'ङ्हव'),
    GlyphRule('စျ', 'स्य'), GlyphRule('စြ', 'स्य'), GlyphRule('စှ', 'स्ह'), GlyphRule('စွ', 'स्व'), GlyphRule('စွှ', 'स्हव'),
    GlyphRule('ဆျ', 'स्य'), GlyphRule('ဆြ', 'स्य'), GlyphRule('ဆှ', 'स्ह'), GlyphRule('ဆွ', 'स्व'), GlyphRule('ဆွှ', 'स्हव'),
    GlyphRule('ဇျ', 'ज्य'), GlyphRule('ဇြ', 'ज्य'), GlyphRule('ဇှ', 'ज्ह'), GlyphRule('ဇွ', 'ज्व'), GlyphRule('ဇွှ', 'ज्हव'),
    GlyphRule('ညျ', 'ज्ञ्य'), GlyphRule('ညြ', 'ज्ञ्य'), GlyphRule('ညှ', 'ज्ञ्ह'), GlyphRule('ညွ', 'ज्ञ्व'), GlyphRule('ညွှ', 'ज्ञ्हव'),
    GlyphRule('တျ', 'त्य'), GlyphRule('တြ', 'त्य'), GlyphRule('တှ', 'त्ह'), GlyphRule('တွ', 'त्व'), GlyphRule('တွှ', 'त्हव'),
    GlyphRule('ထျ', 'थ्य'), GlyphRule('ထြ', 'थ्य'), GlyphRule('ထှ', 'थ्ह'), GlyphRule('ထွ', 'थ्व'), GlyphRule('ထွှ', 'थ्हव'),
    GlyphRule('ဒျ', 'द्य'), GlyphRule('ဒြ', 'द्य'), GlyphRule('ဒှ', 'द्ह'), GlyphRule('ဒွ', 'द्व'), GlyphRule('ဒွှ', 'द्हव'),
    GlyphRule('နျ', 'न्य'), GlyphRule('နြ', 'न्य'), GlyphRule('နှ', 'न्ह'), GlyphRule('နွ', 'न्व'), GlyphRule('နွှ', 'न्हव'),
    GlyphRule('ပျ', 'प्य'), GlyphRule('ပြ', 'प्य'), GlyphRule('ပှ', 'प्ह'), GlyphRule('ပွ', 'प्व'), GlyphRule('ပွှ', 'प्हव'),
    GlyphRule('ဖျ', 'फ्य'), GlyphRule('ဖြ', 'फ्य'), GlyphRule('ဖှ', 'फ्ह'), GlyphRule('ဖွ', 'फ्व'), GlyphRule('ဖွှ', 'फ्हव'),
    GlyphRule('ဗျ', 'ब्य'), GlyphRule('ဗြ', 'ब्य'), GlyphRule('ဗှ', 'ब्ह'), GlyphRule('ဗွ', 'ब्व'), GlyphRule('ဗွှ', 'ब्हव'),
    GlyphRule('ဘျ', 'ब्य'), GlyphRule('ဘြ', 'ब्य'), GlyphRule('ဘှ', 'ब्ह'), GlyphRule('ဘွ', 'ब्व'), GlyphRule('ဘွှ', 'ब्हव'),
    GlyphRule('မျ', 'म्य'), GlyphRule('မြ', 'म्य'), GlyphRule('မှ', 'म्ह'), GlyphRule('မွ', 'म्व'), GlyphRule('မွှ', 'म्हव'),
    GlyphRule('ယျ', 'य्य'), GlyphRule('ယြ', 'य्य'), GlyphRule('ယှ', 'य्ह'), GlyphRule('ယွ', 'य्व'), GlyphRule('ယွှ', 'य्हव'),
    GlyphRule('ရျ', 'य्य'), GlyphRule('ရြ', 'य्य'), GlyphRule('ရှ', 'श'), GlyphRule('ရွ', 'य्व'), GlyphRule('ရွှ', 'य्हव'),
    GlyphRule('လျ', 'ल्य'), GlyphRule('လြ', 'ल्य'), GlyphRule('လှ', 'ल्ह'), GlyphRule('လွ', 'ल्व'), GlyphRule('လွှ', 'ल्हव'),
    GlyphRule('သျ', 'थ्य'), GlyphRule('သြ', 'थ्य'), GlyphRule('သှ', 'थ्ह'), GlyphRule('သွ', 'थ्व'), GlyphRule('သွှ', 'थ्हव'),
    GlyphRule('ဟျ', 'ह्य'), GlyphRule('ဟြ', 'ह्य'), GlyphRule('ဟှ', 'ह्ह'), GlyphRule('ဟွ', 'ह्व'), GlyphRule('ဟွှ', 'ह्हव'),
)

DEFAULT_SPECIAL_CASES: Tuple[SpecialCase, ...] = (
    SpecialCase('မင်္ဂလာပါ', 'मिं2ग1ला2बा2'),
    SpecialCase('မင်္ဂလာပါ။', 'मिं2ग1ला2बा2॥'),
)
