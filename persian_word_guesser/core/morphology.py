# morphology.py
# Generates the inflected forms of a Persian verb from its stems, so a single
# root can be added to the dictionary without listing every conjugation.
# Forms come out in ascending likelihood: inserting them in order leaves the
# most common forms with the highest ranks.

from typing import List, Optional

from persian_word_guesser.core.alphabet import (
    ALEF,
    ALEF_MADDA,
    BEH,
    DAL,
    FARSI_YEH,
    HEH,
    MIM,
    NOON,
    ZWNJ,
)

# personal endings
END_ND = NOON + DAL            # -nd
END_ID = FARSI_YEH + DAL       # -id
END_IM = FARSI_YEH + MIM       # -im
END_AD = DAL                   # -ad
END_E = HEH                    # -e
END_I = FARSI_YEH              # -i
END_AM = MIM                   # -am


def _forms(prefix: str, stem: Optional[str], ad_ending: bool, bare_ending: bool) -> List[str]:
    if not stem:
        return []
    out = [prefix + stem + END_ND, prefix + stem + END_ID, prefix + stem + END_IM]
    # -ad when requested or after a final alef, -e otherwise
    if ad_ending or stem.endswith(ALEF):
        out.append(prefix + stem + END_AD)
    else:
        out.append(prefix + stem + END_E)
    if bare_ending:
        # a final yeh is dropped here and for the remaining endings
        if stem.endswith(FARSI_YEH):
            stem = stem[:-1]
        out.append(prefix + stem)
    out.append(prefix + stem + END_I)
    out.append(prefix + stem + END_AM)
    return out


def conjugate(
    past_stem: str,
    present_stem: str,
    colloquial_present_stem: Optional[str] = None,
) -> List[str]:
    """
    All generated forms of one verb root, least likely first.
    present_stem takes the formal third-person -ad ending; the optional
    colloquial_present_stem takes -e.
    """
    mi = MIM + FARSI_YEH + ZWNJ
    nemi = NOON + MIM + FARSI_YEH + ZWNJ
    be = BEH
    na = NOON

    # stems opening with alef-madda join their prefixes and lose the madda
    if past_stem.startswith(ALEF_MADDA):
        mi = MIM + FARSI_YEH
        nemi = NOON + MIM + FARSI_YEH
        be = BEH + FARSI_YEH
        na = NOON + FARSI_YEH + FARSI_YEH
        past_stem = ALEF + past_stem[1:]
        present_stem = ALEF + present_stem[1:]
        if colloquial_present_stem:
            colloquial_present_stem = ALEF + colloquial_present_stem[1:]

    colloquial = colloquial_present_stem
    out: List[str] = []
    # negated past
    out += _forms(nemi, past_stem, False, True)
    out += _forms(na, past_stem, False, True)
    # negated present
    out += _forms(nemi, present_stem, True, True)
    out += _forms(nemi, colloquial, False, False)
    # past
    out += _forms(mi, past_stem, False, True)
    out += _forms("", past_stem, False, True)
    # negated subjunctive and imperative
    out += _forms(na, present_stem, True, True)
    out += _forms(na, colloquial, False, False)
    # subjunctive and imperative
    out += _forms(be, present_stem, True, True)
    out += _forms(be, colloquial, False, False)
    # present
    out += _forms(mi, present_stem, True, False)
    out += _forms(mi, colloquial, False, False)
    return out
