"""Built-in core lexicon.

Nouns and pronouns are anchors and stay as written; verbs, adjectives and
particles are written in kana. Demonstratives use their colloquial kana form.
"""

from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class LexiconEntry:
    mandarin: Tuple[str, ...]  # Mandarin forms that trigger the entry
    cantonese: str             # written Cantonese form(s), "/"-separated
    jyutping: str
    zhengyu: str               # rendering in the target script
    type: str                  # noun, verb, adj, particle, other

    @property
    def is_anchor(self) -> bool:
        """True when the entry is rendered with its characters rather than kana."""
        return self.zhengyu == self.cantonese

    @property
    def surfaces(self) -> List[str]:
        forms = [form for form in self.cantonese.split("/") if form]
        forms.extend(form for form in self.mandarin if form not in forms)
        return forms


def _e(mandarin, cantonese, jyutping, zhengyu, type_) -> LexiconEntry:
    return LexiconEntry(tuple(mandarin), cantonese, jyutping, zhengyu, type_)


CORE_LEXICON: Tuple[LexiconEntry, ...] = (
    # pronouns
    _e(["我"], "我", "ngo5", "我", "noun"),
    _e(["你"], "你", "nei5", "你", "noun"),
    _e(["他", "她", "它"], "佢", "keoi5", "佢", "noun"),
    _e(["我们"], "我哋", "ngo5dei6", "我哋", "noun"),
    _e(["你们"], "你哋", "nei5dei6", "你哋", "noun"),
    _e(["他们", "她们", "它们"], "佢哋", "keoi5dei6", "佢哋", "noun"),

    # demonstratives (colloquial kana)
    _e(["这个"], "呢個", "ni1go3", "にご", "noun"),
    _e(["那个"], "嗰個", "go2go3", "ごご", "noun"),
    _e(["哪个", "谁"], "边個", "bin1go3", "びんご", "noun"),
    _e(["这里"], "呢度", "ni1dou6", "にどう", "noun"),
    _e(["那里"], "嗰度", "go2dou6", "ごどう", "noun"),
    _e(["哪里"], "边度", "bin1dou6", "びんどう", "noun"),
    _e(["什么"], "乜嘢", "mat1je5", "まっいぇ", "noun"),

    # verbs
    _e(["食", "吃"], "食", "sik6", "しっ", "verb"),
    _e(["去"], "去", "heoi3", "へおい", "verb"),
    _e(["看", "睇"], "睇", "tai2", "たい", "verb"),
    _e(["是", "系", "在"], "系/喺", "hai6", "はい", "verb"),
    _e(["有"], "有", "jau5", "やう", "verb"),
    _e(["来"], "嚟", "lai4", "らい", "verb"),
    _e(["做", "干"], "做", "zou6", "ぞう", "verb"),
    _e(["行", "走"], "行", "haang4", "はあん", "verb"),
    _e(["买"], "买", "maai5", "まあい", "verb"),
    _e(["讲", "说"], "讲", "gong2", "ごん", "verb"),
    _e(["听"], "听", "teng1", "てん", "verb"),
    _e(["决定"], "决定", "kyut3ding6", "きゅっぢん", "verb"),

    # adjectives / adverbs
    _e(["好", "很"], "好", "hou2", "ほう", "adj"),
    _e(["大"], "大", "daai6", "だあい", "adj"),
    _e(["小", "细"], "细", "sai3", "さい", "adj"),
    _e(["多"], "多", "do1", "ど", "adj"),
    _e(["少"], "少", "siu2", "しう", "adj"),
    _e(["漂亮", "美", "靓"], "靓", "leng3", "れん", "adj"),
    _e(["高"], "高", "gou1", "ごう", "adj"),
    _e(["矮"], "矮", "ai2", "あい", "adj"),
    _e(["都"], "都", "dou1", "どう", "adj"),
    _e(["还", "仲"], "仲", "zung6", "ぞん", "adj"),
    _e(["先"], "先", "sin1", "しん", "adj"),
    _e(["就"], "就", "zau6", "ざう", "adj"),
    _e(["又"], "又", "jau6", "やう", "adj"),
    _e(["未", "没"], "未", "mei6", "めい", "adj"),
    _e(["不", "唔"], "唔", "m4", "ん", "adj"),
    _e(["热"], "热", "jit6", "いっ", "adj"),
    _e(["太"], "太", "taai3", "たあい", "adj"),
    _e(["忙"], "忙", "mong4", "もん", "adj"),
    _e(["舒服"], "舒服", "syu1fuk6", "しゅふっ", "adj"),

    # particles / conjunctions
    _e(["了", "咗"], "咗", "zo2", "ぞ", "particle"),
    _e(["正在", "紧"], "紧", "gan2", "がん", "particle"),
    _e(["的", "嘅"], "嘅", "ge3", "げ", "particle"),
    _e(["吗", "咩"], "咩", "me1", "め", "particle"),
    _e(["啊"], "啊", "aa3", "あ", "particle"),
    _e(["啦"], "啦", "laa1", "ら", "particle"),
    _e(["和", "跟", "同"], "同", "tung4", "とん", "particle"),
    _e(["因为"], "因为", "jan1wai6", "やんわい", "particle"),
    _e(["所以"], "所以", "so2ji5", "そい", "particle"),
    _e(["或者"], "或者", "waak6ze2", "わあっぜ", "particle"),

    # classifiers
    _e(["个"], "個", "go3", "ご", "particle"),
    _e(["只"], "只", "zek3", "ぜっ", "particle"),
    _e(["件"], "件", "gin6", "ぎん", "particle"),
    _e(["间"], "间", "gaan1", "があん", "particle"),

    # common nouns
    _e(["饭", "米饭"], "飯", "faan6", "飯", "noun"),
    _e(["电影", "戏"], "戏", "hei3", "戏", "noun"),
    _e(["街"], "街", "gaai1", "街", "noun"),
    _e(["东西", "野"], "嘢", "je5", "嘢", "noun"),
    _e(["明天", "听日"], "听日", "ting1jat6", "听日", "noun"),
    _e(["今天", "今日"], "今日", "gam1jat6", "今日", "noun"),
    _e(["屋", "房子"], "屋", "uk1", "屋", "noun"),
    _e(["家", "家里"], "屋企", "uk1kei2", "屋企", "noun"),
    _e(["天", "天气"], "天气", "tin1hei3", "天气", "noun"),
    _e(["山"], "山", "saan1", "山", "noun"),
)


def anchor_terms(entries=CORE_LEXICON) -> List[str]:
    """All surface forms of the anchor (kept-as-written) entries."""
    terms: List[str] = []
    for entry in entries:
        if not entry.is_anchor:
            continue
        for surface in entry.surfaces:
            if surface not in terms:
                terms.append(surface)
    return terms
