"""Brown-corpus tag set.

Tag values are the canonical lower-case forms used in the tagged corpus
files, e.g. `the/at dog/nn jumped/vbd ./.`.
"""
from enum import Enum

# Brown decorates base tags for foreign words (fw-), titles (-tl),
# headlines (-hl) and cited words (-nc); the base tag carries the part of
# speech.
_FOREIGN = "fw"


class Tag(Enum):
    LParen = "("
    RParen = ")"
    Negator = "*"
    Comma = ","
    Dash = "--"
    Term = "."
    Colon = ":"
    ABL = "abl"
    ABN = "abn"
    ABX = "abx"
    AP = "ap"
    AT = "at"
    BE = "be"
    BED = "bed"
    BEDZ = "bedz"
    BEG = "beg"
    BEM = "bem"
    BEN = "ben"
    BER = "ber"
    BEZ = "bez"
    CC = "cc"
    CD = "cd"
    CS = "cs"
    DO = "do"
    DOD = "dod"
    DOZ = "doz"
    DT = "dt"
    DTI = "dti"
    DTS = "dts"
    DTX = "dtx"
    EX = "ex"
    FW = "fw"
    HV = "hv"
    HVD = "hvd"
    HVG = "hvg"
    HVN = "hvn"
    HVZ = "hvz"
    IN = "in"
    JJ = "jj"
    JJR = "jjr"
    JJS = "jjs"
    JJT = "jjt"
    MD = "md"
    NN = "nn"
    NN_POSS = "nn$"
    NNS = "nns"
    NNS_POSS = "nns$"
    NP = "np"
    NP_POSS = "np$"
    NPS = "nps"
    NPS_POSS = "nps$"
    NR = "nr"
    NRS = "nrs"
    OD = "od"
    PN = "pn"
    PN_POSS = "pn$"
    PP_POSS = "pp$"
    PP_POSS_POSS = "pp$$"
    PPL = "ppl"
    PPLS = "ppls"
    PPO = "ppo"
    PPS = "pps"
    PPSS = "ppss"
    QL = "ql"
    QLP = "qlp"
    RB = "rb"
    RBR = "rbr"
    RBT = "rbt"
    RN = "rn"
    RP = "rp"
    TO = "to"
    UH = "uh"
    VB = "vb"
    VBD = "vbd"
    VBG = "vbg"
    VBN = "vbn"
    VBZ = "vbz"
    WDT = "wdt"
    WP_POSS = "wp$"
    WPO = "wpo"
    WPS = "wps"
    WQL = "wql"
    WRB = "wrb"
    Unk = "unk"

    def canonical_form(self) -> str:
        return self.value

    @classmethod
    def unknown(cls) -> "Tag":
        return cls.Unk

    @classmethod
    def parse(cls, text: str) -> "Tag":
        """Read a tag from its corpus form; unrecognised forms read as Unk."""
        form = text.strip().lower()
        if form != cls.Dash.value and "-" in form:
            parts = form.split("-")
            if parts[0] == _FOREIGN and len(parts) > 1:
                parts = parts[1:]
            form = parts[0]
        try:
            return cls(form)
        except ValueError:
            return cls.Unk


class Chunk(Enum):
    C_NP = "NP"
    C_VP = "VP"
    C_PP = "PP"
    C_ADJP = "ADJP"
    C_ADVP = "ADVP"
    C_CL = "CL"
    C_O = "O"

    def canonical_form(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "Chunk":
        try:
            return cls(text.strip().upper())
        except ValueError:
            raise ValueError(f"Unknown chunk tag: {text!r}")
