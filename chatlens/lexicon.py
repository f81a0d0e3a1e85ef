"""
Lexicon tables for ChatLens
Turkish sentiment words, negation and intensity markers, and the keyword
lists used by the relationship analyzer. Pure data.
"""

from typing import Dict, List, Tuple

# ============================================================================
# SENTIMENT LEXICON
# ============================================================================

# word or two-word phrase -> (polarity, emotion category)
SENTIMENT_LEXICON: Dict[str, Tuple[float, str]] = {
    # Happiness
    "mutlu": (1, "happiness"),
    "mutluyum": (1, "happiness"),
    "sevinç": (1, "happiness"),
    "keyifli": (1, "happiness"),
    "neşeli": (1, "happiness"),
    "harika": (2, "happiness"),
    "muhteşem": (2, "happiness"),
    "şahane": (2, "happiness"),
    "süper": (1, "happiness"),
    "mükemmel": (2, "happiness"),
    "heyecanlı": (1, "happiness"),
    "bayıldım": (2, "happiness"),
    "😊": (1, "happiness"),
    "😄": (1, "happiness"),
    "😁": (1, "happiness"),

    # Satisfaction
    "iyi": (1, "satisfaction"),
    "güzel": (1, "satisfaction"),
    "hoş": (1, "satisfaction"),
    "memnun": (1, "satisfaction"),
    "tatmin": (1, "satisfaction"),
    "başarılı": (1, "satisfaction"),
    "tamam": (0.5, "satisfaction"),
    "evet": (0.5, "satisfaction"),
    "tamamdır": (0.5, "satisfaction"),
    "olur": (0.5, "satisfaction"),
    "iyi ki": (1, "satisfaction"),
    "ne güzel": (1.5, "satisfaction"),

    # Romantic
    "seviyorum": (2, "romantic"),
    "sevgi": (1, "romantic"),
    "aşk": (2, "romantic"),
    "sevgili": (1, "romantic"),
    "canım": (1, "romantic"),
    "tatlım": (1, "romantic"),
    "aşkım": (2, "romantic"),
    "sevgilim": (2, "romantic"),
    "hayatım": (1, "romantic"),
    "özledim": (1, "romantic"),
    "seni seviyorum": (1, "romantic"),
    "❤️": (2, "romantic"),
    "❤": (2, "romantic"),
    "💕": (2, "romantic"),
    "😍": (2, "romantic"),
    "🥰": (2, "romantic"),

    # Humor
    "haha": (1, "humor"),
    "hahaha": (1, "humor"),
    "ahaha": (1, "humor"),
    "komik": (1, "humor"),
    "😂": (1, "humor"),
    "🤣": (1, "humor"),

    # Gratitude
    "teşekkür": (1, "gratitude"),
    "teşekkürler": (1, "gratitude"),
    "sağol": (1, "gratitude"),
    "sağolun": (1, "gratitude"),
    "minnettarım": (1, "gratitude"),
    "rica": (0.5, "gratitude"),
    "çok teşekkürler": (0.5, "gratitude"),
    "🙏": (1, "gratitude"),

    # Approval
    "tebrikler": (1, "approval"),
    "tebrik": (1, "approval"),
    "aferin": (1, "approval"),
    "bravo": (1, "approval"),
    "helal": (1, "approval"),
    "gurur": (1, "approval"),
    "takdir": (1, "approval"),
    "👍": (1, "approval"),
    "👏": (1, "approval"),

    # Sadness
    "üzgün": (-1, "sadness"),
    "üzüldüm": (-1, "sadness"),
    "mutsuz": (-1, "sadness"),
    "mutsuzum": (-1, "sadness"),
    "kederli": (-1, "sadness"),
    "hüzünlü": (-1, "sadness"),
    "acı": (-1, "sadness"),
    "ağlamak": (-1, "sadness"),
    "gözyaşı": (-1, "sadness"),
    "canım sıkıldı": (-2, "sadness"),
    "💔": (-1, "sadness"),
    "😢": (-1, "sadness"),
    "😭": (-1, "sadness"),
    "😔": (-1, "sadness"),
    "😞": (-1, "sadness"),

    # Anger
    "kızgın": (-1, "anger"),
    "sinirli": (-1, "anger"),
    "öfkeli": (-2, "anger"),
    "öfke": (-2, "anger"),
    "kızmak": (-1, "anger"),
    "sinirlendim": (-1, "anger"),
    "bağırmak": (-1, "anger"),
    "çıldırmak": (-2, "anger"),
    "delirmek": (-2, "anger"),
    "😡": (-2, "anger"),
    "😠": (-1, "anger"),
    "😤": (-1, "anger"),

    # Disapproval
    "kötü": (-1, "disapproval"),
    "berbat": (-2, "disapproval"),
    "korkunç": (-2, "disapproval"),
    "rezalet": (-2, "disapproval"),
    "felaket": (-2, "disapproval"),
    "hayır": (-0.5, "disapproval"),
    "imkansız": (-1, "disapproval"),
    "yanlış": (-0.5, "disapproval"),
    "hata": (-1, "disapproval"),
    "beğenmedim": (-1, "disapproval"),
    "👎": (-1, "disapproval"),
    "😒": (-0.5, "disapproval"),
    "🙄": (-0.5, "disapproval"),
    "😬": (-0.5, "disapproval"),

    # Fear
    "korku": (-1, "fear"),
    "korkuyorum": (-1, "fear"),
    "endişe": (-1, "fear"),
    "endişeli": (-1, "fear"),
    "panik": (-2, "fear"),
    "tedirgin": (-1, "fear"),
    "ürkmek": (-1, "fear"),
    "dehşet": (-2, "fear"),
    "😱": (-1, "fear"),
    "😨": (-1, "fear"),
    "😟": (-1, "fear"),

    # Problems
    "sorun": (-1, "problem"),
    "problem": (-1, "problem"),
    "sıkıntı": (-1, "problem"),
    "zorluk": (-1, "problem"),
    "engel": (-1, "problem"),
    "arıza": (-1, "problem"),
    "bozuk": (-1, "problem"),
    "kriz": (-1, "problem"),

    # Regret
    "maalesef": (-1, "regret"),
    "üzgünüm": (-1, "regret"),
    "özür": (-0.5, "regret"),
    "keşke": (-0.5, "regret"),
    "pişman": (-1, "regret"),
    "pişmanlık": (-1, "regret"),
    "kusura bakma": (-0.5, "regret"),
}

# Negation words flip the polarity of a nearby match
NEGATION_WORDS = frozenset([
    "değil",
    "yok",
    "olmaz",
    "olmayan",
    "olmadı",
    "olmadığı",
    "değildi",
    "değilim",
    "değilsin",
    "değiller",
    "değiliz",
    "hiç",
    "asla",
    "hayır",
])

# Turkish puts the copula negation after the word ("mutlu değilim")
TRAILING_NEGATION_WORDS = frozenset([
    "değil",
    "değilim",
    "değilsin",
    "değiliz",
    "değiller",
    "değildi",
    "değildim",
    "yok",
])

# Amplifiers (> 1) and diminishers (< 1) applied to the following match
INTENSITY_MODIFIERS: Dict[str, float] = {
    "çok": 1.5,
    "aşırı": 1.5,
    "biraz": 0.5,
    "azıcık": 0.5,
    "hiç": 1.2,
    "asla": 1.2,
    "kesinlikle": 1.5,
    "tam": 1.2,
    "gerçekten": 1.3,
    "maalesef": 1.2,
}

# Emphasis markers for message intensity; uppercase forms match case-sensitively
INTENSITY_MARKERS: List[str] = [
    "!!!", "!!",
    "ASLA", "KESİNLİKLE", "LÜTFEN", "ÇOK", "HİÇ",
    "asla", "kesinlikle", "lütfen", "çok", "hiç",
]

# ============================================================================
# RELATIONSHIP KEYWORDS
# ============================================================================

ROMANTIC_WORDS = [
    "aşkım", "canım", "sevgilim", "tatlım", "hayatım", "birtanem",
    "bebeğim", "seviyorum", "özledim", "kalp",
]

APOLOGY_WORDS = [
    "özür", "sorry", "pardon", "affet", "kusura bakma", "üzgünüm", "hata",
]

ARGUMENT_WORDS = [
    "kızgınım", "sinirliyim", "kızdım", "saçmalama", "yapma",
    "istemiyorum", "rahatsız", "kızma",
]

HUMOR_WORDS = [
    "haha", "lol", "ahaha", "sjsj", "komik", "espri", "gülmekten", "kahkaha",
]

FOOD_WORDS = [
    "yemek", "acıktım", "kahvaltı", "öğle yemeği", "akşam yemeği", "pizza",
    "hamburger", "yedim", "yiyelim", "restoran", "cafe", "lezzetli",
    "dürüm", "döner", "lahmacun",
]

# excuse category -> trigger phrases
EXCUSE_PHRASES: Dict[str, List[str]] = {
    "traffic": ["trafik", "trafikte", "yoldayım", "araçtayım", "otobüsteyim"],
    "meeting": ["toplantı", "toplantıdayım", "işte", "meşgulüm", "işteyim", "çalışıyorum"],
    "oversleeping": ["uyuyordum", "uyumuşum", "uyku", "uykudaydım", "geç uyandım", "alarm"],
    "phone_dead": ["şarjım", "şarj", "telefonum", "batarya", "kısık", "sessizde", "duymadım"],
    "was_out": ["dışarıdaydım", "çıktım", "arkadaşlarla", "görüşüyordum", "buluşma"],
}

HEART_EMOJIS = frozenset(["💕", "💓", "💗", "💖", "💘"])
LAUGH_EMOJIS = frozenset(["😂", "🤣", "😹", "😆"])

# (emoji set, label) checked in order against a sender's most used emoji
EMOJI_PERSONALITIES: List[Tuple[frozenset, str]] = [
    (frozenset(["💕", "💓"]), "romantic"),
    (frozenset(["😂", "🤣"]), "comedian"),
    (frozenset(["👍", "🙏"]), "positive"),
    (frozenset(["😡", "😠"]), "angry"),
    (frozenset(["😭", "😢"]), "emotional"),
    (frozenset(["🤔", "🧐"]), "thoughtful"),
]
EMOJI_PERSONALITY_DEFAULT = "mixed"
EMOJI_PERSONALITY_NONE = "does not use emoji"

# ============================================================================
# WORD FREQUENCY
# ============================================================================

STOP_WORDS = frozenset([
    "ve", "ile", "ama", "fakat", "ancak", "çünkü", "veya", "ya", "ne", "mı", "mi", "mu", "mü",
    "ben", "sen", "o", "biz", "siz", "onlar", "benim", "senin", "onun", "bizim", "sizin", "onların",
    "bu", "şu", "bunu", "şunu", "onu", "bunlar", "şunlar",
    "bir", "biraz", "birkaç", "çok", "az", "daha", "en", "her", "hiç", "tüm", "tümü",
    "gün", "günler", "zaman", "zamanlar", "sadece", "şimdi", "sonra", "önce",
    "günaydın", "iyi", "güzeldir", "güzeldi", "güzelleşti",
])
