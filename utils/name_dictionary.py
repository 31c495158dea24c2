"""
Name Dictionary for English-to-Amharic name conversion.

Contains:
1. ENGLISH_TO_AMHARIC: Lowercase Latin spellings mapped to one canonical
   Ethiopic rendering. Several spellings may share a rendering.
2. DICTIONARY_PAIRS: The same data as an immutable tuple of pairs, used for
   linear scans.
"""
from typing import Tuple
from types import MappingProxyType

# =============================================================================
# ENGLISH TO AMHARIC DIRECT MAPPINGS
# =============================================================================
# Common Ethiopian given names and their usual Amharic spellings.
# Keys must be lowercase and non-empty.

_ENGLISH_TO_AMHARIC = {
    # Male Names - Very Common
    "amanuel": "አማኑኤል",
    "emanuel": "አማኑኤል",
    "tadesse": "ታደሰ",
    "tesfaye": "ተስፋዬ",
    "tsegaye": "ፀጋዬ",
    "yohannes": "ዮሐንስ",
    "abebe": "አበበ",
    "kebede": "ከበደ",
    "alemu": "አለሙ",
    "bekele": "በቀለ",
    "girma": "ግርማ",
    "haile": "ኃይሌ",
    "hailu": "ኃይሉ",
    "mekonnen": "መኮንን",
    "tefera": "ተፈራ",
    "worku": "ወርቁ",
    "getachew": "ጌታቸው",
    "solomon": "ሰሎሞን",
    "dawit": "ዳዊት",
    "daniel": "ዳንኤል",
    "samuel": "ሳሙኤል",
    "yared": "ያሬድ",
    "yonas": "ዮናስ",
    "biniam": "ቢንያም",
    "mulugeta": "ሙሉጌታ",
    "berhanu": "ብርሃኑ",
    "birhanu": "ብርሃኑ",
    "tekle": "ተክሌ",
    "gebre": "ገብረ",
    "wolde": "ወልደ",
    "mesfin": "መስፍን",
    "kassa": "ካሳ",
    "negash": "ነጋሽ",
    "asfaw": "አስፋው",
    "fikru": "ፍቅሩ",
    "yosef": "ዮሴፍ",
    "yoseph": "ዮሴፍ",
    "eyob": "እዮብ",
    "abel": "አቤል",
    "henok": "ሄኖክ",
    "natnael": "ናትናኤል",
    "nahom": "ናሆም",
    "kaleb": "ካሌብ",
    "mikael": "ሚካኤል",
    "gabriel": "ገብርኤል",
    "ermias": "ኤርሚያስ",
    "sisay": "ሲሳይ",
    "tamirat": "ታምራት",
    "zerihun": "ዘሪሁን",
    "habtamu": "ሀብታሙ",
    "fasil": "ፋሲል",
    "demeke": "ደመቀ",
    "desta": "ደስታ",
    "tilahun": "ጥላሁን",
    "teshome": "ተሾመ",
    "assefa": "አሰፋ",
    "alemayehu": "አለማየሁ",
    "seyoum": "ስዩም",
    "gashaw": "ጋሻው",
    "mengistu": "መንግስቱ",
    "tewodros": "ቴዎድሮስ",
    "tedros": "ቴድሮስ",

    # Female Names - Very Common
    "selam": "ሰላም",
    "almaz": "አልማዝ",
    "aster": "አስቴር",
    "tigist": "ትዕግስት",
    "meseret": "መሰረት",
    "hirut": "ሂሩት",
    "genet": "ገነት",
    "senait": "ሰናይት",
    "bethlehem": "ቤተልሔም",
    "betelhem": "ቤተልሔም",
    "mahlet": "ማህሌት",
    "hanna": "ሐና",
    "sara": "ሳራ",
    "ruth": "ሩት",
    "marta": "ማርታ",
    "martha": "ማርታ",
    "selamawit": "ሰላማዊት",
    "meron": "ሜሮን",
    "rahel": "ራሔል",
    "saba": "ሳባ",
    "tsion": "ጽዮን",
    "zion": "ጽዮን",
    "eden": "ኤደን",
    "kidist": "ቅድስት",
    "yeshi": "የሺ",
    "mulu": "ሙሉ",
    "azeb": "አዜብ",
    "tirunesh": "ጥሩነሽ",
    "meskerem": "መስከረም",
    "frehiwot": "ፍሬሕይወት",
    "helen": "ሄለን",
    "konjit": "ቆንጂት",
    "netsanet": "ነፃነት",
    "tsehay": "ፀሐይ",
    "wubet": "ውበት",
    "yordanos": "ዮርዳኖስ",
    "mekdes": "መቅደስ",
    "emebet": "እመቤት",
    "workinesh": "ወርቅነሽ",
    "abeba": "አበባ",
    "seble": "ሰብለ",
    "mariam": "ማርያም",
    "maryam": "ማርያም",
}

# Read-only views so callers cannot mutate the shared table
ENGLISH_TO_AMHARIC = MappingProxyType(_ENGLISH_TO_AMHARIC)
DICTIONARY_PAIRS: Tuple[Tuple[str, str], ...] = tuple(_ENGLISH_TO_AMHARIC.items())
