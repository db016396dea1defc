"""Query matching for history search.

A query matches a candidate when it occurs literally (case-insensitively) or
when it can be spelled out by the pinyin of consecutive characters in the
candidate. Each Han character contributes its full pinyin reading or just its
first letter. A Latin word that splits completely into pinyin syllables
(``Beijing``) is treated the same way, syllable by syllable; other Latin text
only matches literally. The last unit may be matched by a prefix of its
spelling so that partially typed queries keep matching.
"""

from __future__ import annotations

import re
from functools import lru_cache

from pypinyin import Style, pinyin

_HAN_RE = re.compile(r"[\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufaff]")
_LATIN_WORD_RE = re.compile(r"[A-Za-z]+")

# Standard Mandarin syllables without tones, u-umlaut written as "v"
_SYLLABLES = frozenset("""
a ai an ang ao
ba bai ban bang bao bei ben beng bi bian biao bie bin bing bo bu
ca cai can cang cao ce cen ceng cha chai chan chang chao che chen cheng chi
chong chou chu chua chuai chuan chuang chui chun chuo ci cong cou cu cuan cui
cun cuo
da dai dan dang dao de dei den deng di dia dian diao die ding diu dong dou du
duan dui dun duo
e ei en eng er
fa fan fang fei fen feng fo fou fu
ga gai gan gang gao ge gei gen geng gong gou gu gua guai guan guang gui gun guo
ha hai han hang hao he hei hen heng hong hou hu hua huai huan huang hui hun huo
ji jia jian jiang jiao jie jin jing jiong jiu ju juan jue jun
ka kai kan kang kao ke kei ken keng kong kou ku kua kuai kuan kuang kui kun kuo
la lai lan lang lao le lei leng li lia lian liang liao lie lin ling liu lo long
lou lu luan lun luo lv lve
ma mai man mang mao me mei men meng mi mian miao mie min ming miu mo mou mu
na nai nan nang nao ne nei nen neng ni nian niang niao nie nin ning niu nong
nou nu nuan nuo nv nve
o ou
pa pai pan pang pao pei pen peng pi pian piao pie pin ping po pou pu
qi qia qian qiang qiao qie qin qing qiong qiu qu quan que qun
ran rang rao re ren reng ri rong rou ru rua ruan rui run ruo
sa sai san sang sao se sen seng sha shai shan shang shao she shei shen sheng
shi shou shu shua shuai shuan shuang shui shun shuo si song sou su suan sui sun
suo
ta tai tan tang tao te teng ti tian tiao tie ting tong tou tu tuan tui tun tuo
wa wai wan wang wei wen weng wo wu
xi xia xian xiang xiao xie xin xing xiong xiu xu xuan xue xun
ya yan yang yao ye yi yin ying yo yong you yu yuan yue yun
za zai zan zang zao ze zei zen zeng zha zhai zhan zhang zhao zhe zhei zhen
zheng zhi zhong zhou zhu zhua zhuai zhuan zhuang zhui zhun zhuo zi zong zou zu
zuan zui zun zuo
""".split())

_MAX_SYLLABLE = max(len(s) for s in _SYLLABLES)


@lru_cache(maxsize=4096)
def han_readings(ch: str) -> tuple[str, ...]:
    """All toneless pinyin readings of a Han character (heteronyms included)."""
    readings = pinyin(ch, style=Style.NORMAL, heteronym=True)
    if not readings:
        return ()
    return tuple(dict.fromkeys(r.lower() for r in readings[0] if r and r.isascii()))


def _syllable_ok(word: str, pos: int, size: int) -> bool:
    syllable = word[pos:pos + size]
    if len(syllable) < size or syllable not in _SYLLABLES:
        return False
    # Inside a word a vowel-initial syllable needs an apostrophe (xi'an)
    return pos == 0 or syllable[0] not in "aeo"


def _latin_units(candidate: str) -> dict[int, list[tuple[str, int]]]:
    """Syllables of Latin words that spell out pinyin completely.

    Maps a candidate position to the syllables starting there, each with the
    position after it. Only positions on some full split of the word are
    included, so ``Beijing`` yields bei+jing while ``meat`` yields nothing.
    """
    units: dict[int, list[tuple[str, int]]] = {}
    for m in _LATIN_WORD_RE.finditer(candidate):
        start = m.start()
        word = m.group().lower()
        n = len(word)
        sizes = range(1, _MAX_SYLLABLE + 1)
        reach = [False] * (n + 1)
        reach[0] = True
        for i in range(n):
            if reach[i]:
                for size in sizes:
                    if _syllable_ok(word, i, size):
                        reach[i + size] = True
        if not reach[n]:
            continue
        finish = [False] * (n + 1)
        finish[n] = True
        for i in range(n - 1, -1, -1):
            finish[i] = any(
                _syllable_ok(word, i, size) and finish[i + size] for size in sizes
            )
        for i in range(n):
            if not (reach[i] and finish[i]):
                continue
            found = [
                (word[i:i + size], start + i + size)
                for size in sizes
                if _syllable_ok(word, i, size) and finish[i + size]
            ]
            if found:
                units[start + i] = found
    return units


def _phonetic_match(query: str, candidate: str) -> bool:
    memo: dict[tuple[int, int], bool] = {}
    latin = _latin_units(candidate)

    def units_at(ci: int) -> list[tuple[str, int]]:
        ch = candidate[ci]
        if _HAN_RE.match(ch):
            return [(r, ci + 1) for r in han_readings(ch)]
        return latin.get(ci, [])

    def walk(qi: int, ci: int) -> bool:
        if qi == len(query):
            return True
        if ci >= len(candidate):
            return False
        key = (qi, ci)
        if key in memo:
            return memo[key]
        memo[key] = False
        rest = query[qi:]
        result = False
        literal = candidate[ci].casefold()
        if rest.startswith(literal) and walk(qi + len(literal), ci + 1):
            result = True
        else:
            for spelling, next_ci in units_at(ci):
                # Trailing partial syllable
                if spelling.startswith(rest):
                    result = True
                    break
                if rest.startswith(spelling) and walk(qi + len(spelling), next_ci):
                    result = True
                    break
                if rest[0] == spelling[0] and walk(qi + 1, next_ci):
                    result = True
                    break
        memo[key] = result
        return result

    return any(walk(0, start) for start in range(len(candidate)))


def matches(query: str, candidate: str, phonetic: bool = True) -> bool:
    """Return True if ``query`` matches ``candidate``.

    An empty query never matches. Literal matching is case-insensitive; with
    ``phonetic`` enabled, pinyin full spellings and initials also match.
    """
    if not query:
        return False
    if query.casefold() in candidate.casefold():
        return True
    if not phonetic:
        return False
    return _phonetic_match(query.lower(), candidate)
