import unicodedata
from functools import lru_cache

# Base syllables grouped by final, see https://en.wikipedia.org/wiki/Pinyin_table
SYLLABLE_TABLE = (
    "zhi chi shi ri zi ci si",
    "a ba pa ma fa da ta na la ga ka ha zha cha sha za ca sa",
    "e me de te ne le ge ke he zhe che she re ze ce se",
    "ai bai pai mai dai tai nai lai gai kai hai zhai chai shai zai cai sai",
    "ei bei pei mei fei dei tei nei lei gei kei hei zhei shei zei sei",
    "ao bao pao mao dao tao nao lao gao kao hao zhao chao shao rao zao cao sao",
    "ou pou mou fou dou tou nou lou gou kou hou zhou chou shou rou zou cou sou",
    "an ban pan man fan dan tan nan lan gan kan han zhan chan shan ran zan can san",
    "en ben pen men fen den nen gen ken hen zhen chen shen ren zen cen sen",
    "ang bang pang mang fang dang tang nang lang gang kang hang zhang chang shang rang zang cang sang",
    "eng beng peng meng feng deng teng neng leng geng keng heng zheng cheng sheng reng zeng ceng seng",
    "er",
    "yi bi pi mi di ti ni li ji qi xi",
    "ya dia nia lia jia qia xia",
    "yo",
    "ye bie pie mie die tie nie lie jie qie xie",
    "yai",
    "yao biao piao miao fiao diao tiao niao liao jiao qiao xiao",
    "you miu diu niu liu jiu qiu xiu",
    "yan bian pian mian dian tian nian lian jian qian xian",
    "yin bin pin min nin lin jin qin xin",
    "yang biang diang niang liang jiang qiang xiang",
    "ying bing ping ming ding ting ning ling jing qing xing",
    "wu bu pu mu fu du tu nu lu gu ku hu zhu chu shu ru zu cu su",
    "wa gua kua hua zhua chua shua rua",
    "wo bo po mo fo duo tuo nuo luo guo kuo huo zhuo chuo shuo ruo zuo cuo suo",
    "wai guai kuai huai zhuai chuai shuai",
    "wei dui tui gui kui hui zhui chui shui rui zui cui sui",
    "wan duan tuan nuan luan guan kuan huan zhuan chuan shuan ruan zuan cuan suan",
    "wen dun tun nun lun gun kun hun zhun chun shun run zun cun sun",
    "wang guang kuang huang zhuang chuang shuang",
    "weng dong tong nong long gong kong hong zhong chong shong rong zong cong song",
    "yu nü lü ju qu xu",
    "yue nüe lüe jue que xue",
    "yuan juan quan xuan",
    "yun lün jun qun xun",
    "yong jiong qiong xiong",
)

TONE_DIGITS = "012345"


def build_syllable_set() -> frozenset[str]:
    """Expands the syllable table into every base syllable with and without a tone digit."""
    syllables = set()
    for group in SYLLABLE_TABLE:
        for syllable in group.split():
            syllables.add(syllable)
            syllables.update(syllable + digit for digit in TONE_DIGITS)
    return frozenset(syllables)


@lru_cache(maxsize=None)
def get_syllable_set() -> frozenset[str]:
    """Returns the process-wide syllable set, building it on first use."""
    return build_syllable_set()


MAX_SYLLABLE_LENGTH = max(len(s) for group in SYLLABLE_TABLE for s in group.split()) + 1


def is_syllable(text: str) -> bool:
    """Checks whether text is a known syllable, ignoring case."""
    return unicodedata.normalize("NFC", text.lower()) in get_syllable_set()


def segment_word(word: str) -> list[str]:
    """
    Splits a word into syllables, always taking the longest known syllable first.

    A concatenation such as ``"Ni3hao3"`` becomes ``["Ni3", "hao3"]``. When no
    prefix of the remaining text is a syllable the remainder is kept as one
    piece, so the pieces always join back to ``word``.

    Parameters
    ----------
    word : str
        A single word token, as produced by the word splitter.

    Returns
    -------
    list[str]
        The pieces of ``word`` in order.
    """
    pieces = []
    remaining = word
    while remaining:
        if is_syllable(remaining):
            pieces.append(remaining)
            break
        # One extra character for a decomposed ü.
        longest = min(len(remaining) - 1, MAX_SYLLABLE_LENGTH + 1)
        for end in range(longest, 0, -1):
            if unicodedata.combining(remaining[end]):
                continue
            if is_syllable(remaining[:end]):
                pieces.append(remaining[:end])
                remaining = remaining[end:]
                break
        else:
            pieces.append(remaining)
            break
    return pieces
