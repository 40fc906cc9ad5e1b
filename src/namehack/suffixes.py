"""
Known public suffixes and the parser that validates user supplied suffix CSVs
against them.

The bundled catalogue covers legacy and popular new gTLDs, the ASCII ccTLDs
and the usual second-level registration zones. Pass --update-psl to merge the
current Mozilla Public Suffix List on top of it.
"""

_GENERIC = """
com net org info biz name pro mobi aero asia cat coop edu gov int jobs mil
museum tel travel xxx post
app dev page blog shop store online site tech xyz club top vip win live art
design cloud email studio agency digital solutions network systems media news
world today space website fun life team zone link click guru ninja rocks
social games group company global center services academy
"""

_COUNTRY = """
ac ad ae af ag ai al am ao aq ar as at au aw ax az ba bb bd be bf bg bh bi bj
bm bn bo br bs bt bw by bz ca cc cd cf cg ch ci ck cl cm cn co cr cu cv cw cx
cy cz de dj dk dm do dz ec ee eg er es et eu fi fj fk fm fo fr ga gd ge gf gg
gh gi gl gm gn gp gq gr gs gt gu gw gy hk hm hn hr ht hu id ie il im in io iq
ir is it je jm jo jp ke kg kh ki km kn kp kr kw ky kz la lb lc li lk lr ls lt
lu lv ly ma mc md me mg mh mk ml mm mn mo mp mq mr ms mt mu mv mw mx my mz na
nc ne nf ng ni nl no np nr nu nz om pa pe pf pg ph pk pl pm pn pr ps pt pw py
qa re ro rs ru rw sa sb sc sd se sg sh si sk sl sm sn so sr ss st su sv sx sy
sz tc td tf tg th tj tk tl tm tn to tr tt tv tw tz ua ug uk us uy uz va vc ve
vg vi vn vu wf ws ye yt za zm zw
"""

_SECOND_LEVEL = """
co.uk org.uk me.uk ltd.uk plc.uk net.uk ac.uk gov.uk
com.br net.br org.br
com.au net.au org.au
co.nz net.nz org.nz
co.jp ne.jp or.jp
com.cn net.cn org.cn
co.in net.in org.in
co.za com.mx com.ar com.tr co.kr com.sg com.hk com.tw co.il co.id com.pt
"""

PUBLIC_SUFFIXES = frozenset((_GENERIC + _COUNTRY + _SECOND_LEVEL).split())


class UnknownSuffixError(ValueError):
    def __init__(self, suffix):
        super().__init__(f"Unknown public suffix: {suffix!r}")
        self.suffix = suffix


def parse_public_suffix_csv(csv, accepted, allow_unknown=False):
    """
    Splits a comma separated suffix list, trimming blanks and dropping empty
    and repeated entries while keeping first-seen order. Unless allow_unknown
    is set, a token missing from `accepted` fails the whole parse.
    """
    psl = []
    seen = set()
    for token in csv.split(','):
        token = token.strip()
        if not token or token in seen:
            continue
        if not allow_unknown and token not in accepted:
            raise UnknownSuffixError(token)
        seen.add(token)
        psl.append(token)
    return psl


def known_tlds(accepted):
    return sorted(s for s in accepted if '.' not in s)


def parse_public_suffix_list(text):
    """Reads the ICANN section of a public_suffix_list.dat document."""
    suffixes = set()
    for line in text.splitlines():
        line = line.strip()
        if '===BEGIN PRIVATE DOMAINS===' in line:
            break
        if not line or line.startswith('//'):
            continue
        rule = line.split()[0]
        # Wildcard and exception rules do not name a registrable suffix
        if rule.startswith('*') or rule.startswith('!'):
            continue
        suffixes.add(rule.lower())
    return suffixes
