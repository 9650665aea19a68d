"""
Language codes accepted when no MediaWiki API endpoint is known or reachable.

Snapshot of the monolingual text content languages of https://www.wikidata.org/w/api.php.
Regenerate with `python language_codes_cli.py update-default-codes`.
"""

DEFAULT_LANGUAGE_CODES = frozenset(
    [
        "aa",
        "ab",
        "abe",
        "abq",
        "abs",
        "ace",
        "ady",
        "ady-cyrl",
        "aeb",
        "aeb-arab",
        "aeb-latn",
        "af",
        "ak",
        "aln",
        "als",
        "am",
        "ami",
        "an",
        "ang",
        "anp",
        "ar",
        "arc",
        "arn",
        "arq",
        "ary",
        "arz",
        "as",
        "ase",
        "ast",
        "atj",
        "av",
        "avk",
        "awa",
        "ay",
        "az",
        "azb",
        "ba",
        "ban",
        "bar",
        "bbc",
        "bbc-latn",
        "bcc",
        "bcl",
        "be",
        "be-tarask",
        "bg",
        "bgn",
        "bh",
        "bho",
        "bi",
        "bjn",
        "bm",
        "bn",
        "bnn",
        "bo",
        "bpy",
        "bqi",
        "br",
        "brh",
        "brx",
        "bs",
        "btm",
        "bto",
        "bug",
        "bxr",
        "ca",
        "cbk-zam",
        "cdo",
        "ce",
        "ceb",
        "ch",
        "chn",
        "cho",
        "chr",
        "chy",
        "ckb",
        "cnr",
        "co",
        "cop",
        "cps",
        "cr",
        "crh",
        "crh-cyrl",
        "crh-latn",
        "cs",
        "csb",
        "cu",
        "cv",
        "cy",
        "da",
        "de",
        "de-at",
        "de-ch",
        "din",
        "diq",
        "dsb",
        "dtp",
        "dty",
        "dv",
        "dz",
        "ee",
        "egl",
        "el",
        "el-cy",
        "eml",
        "en",
        "en-ca",
        "en-gb",
        "eo",
        "es",
        "es-419",
        "et",
        "ett",
        "eu",
        "ext",
        "eya",
        "fa",
        "ff",
        "fi",
        "fit",
        "fj",
        "fkv",
        "fo",
        "fos",
        "fr",
        "fr-ca",
        "frc",
        "frm",
        "fro",
        "frp",
        "frr",
        "fuf",
        "fur",
        "fy",
        "ga",
        "gag",
        "gan",
        "gan-hans",
        "gan-hant",
        "gcr",
        "gd",
        "gez",
        "gl",
        "glk",
        "gmy",
        "gn",
        "gom",
        "gom-deva",
        "gom-latn",
        "gor",
        "got",
        "grc",
        "gsw",
        "gu",
        "gv",
        "ha",
        "hai",
        "hak",
        "haw",
        "haz",
        "hbo",
        "he",
        "hi",
        "hif",
        "hif-latn",
        "hil",
        "ho",
        "hr",
        "hrx",
        "hsb",
        "ht",
        "hu",
        "hy",
        "hyw",
        "hz",
        "ia",
        "id",
        "ie",
        "ig",
        "ii",
        "ik",
        "ike-cans",
        "ike-latn",
        "ilo",
        "inh",
        "io",
        "is",
        "it",
        "iu",
        "ja",
        "jam",
        "jbo",
        "jut",
        "jv",
        "ka",
        "kaa",
        "kab",
        "kbd",
        "kbd-cyrl",
        "kbp",
        "kea",
        "kg",
        "khw",
        "ki",
        "kiu",
        "kj",
        "kjh",
        "kjp",
        "kk",
        "kk-arab",
        "kk-cn",
        "kk-cyrl",
        "kk-kz",
        "kk-latn",
        "kk-tr",
        "kl",
        "km",
        "kn",
        "ko",
        "ko-kp",
        "koi",
        "koy",
        "kr",
        "krc",
        "kri",
        "krj",
        "krl",
        "ks",
        "ks-arab",
        "ks-deva",
        "ksh",
        "ku",
        "ku-arab",
        "ku-latn",
        "kum",
        "kv",
        "kw",
        "ky",
        "la",
        "lad",
        "lag",
        "lb",
        "lbe",
        "lez",
        "lfn",
        "lg",
        "li",
        "lij",
        "liv",
        "lki",
        "lkt",
        "lld",
        "lmo",
        "ln",
        "lo",
        "loz",
        "lrc",
        "lt",
        "ltg",
        "lus",
        "luz",
        "lv",
        "lzh",
        "lzz",
        "mai",
        "map-bms",
        "mdf",
        "mg",
        "mh",
        "mhr",
        "mi",
        "mid",
        "min",
        "mis",
        "mk",
        "ml",
        "mn",
        "mnc",
        "mni",
        "mnw",
        "mo",
        "moe",
        "mr",
        "mrj",
        "ms",
        "mt",
        "mul",
        "mus",
        "mwl",
        "my",
        "myv",
        "mzn",
        "na",
        "nah",
        "nan",
        "nap",
        "nb",
        "nds",
        "nds-nl",
        "ne",
        "new",
        "ng",
        "niu",
        "nl",
        "nn",
        "no",
        "nod",
        "non",
        "nov",
        "nqo",
        "nr",
        "nrm",
        "nso",
        "nv",
        "nxm",
        "ny",
        "nys",
        "oc",
        "olo",
        "om",
        "ood",
        "or",
        "os",
        "ota",
        "otk",
        "pa",
        "pag",
        "pam",
        "pap",
        "pcd",
        "pdc",
        "pdt",
        "pfl",
        "pi",
        "pih",
        "pjt",
        "pl",
        "pms",
        "pnb",
        "pnt",
        "ppu",
        "prg",
        "ps",
        "pt",
        "pt-br",
        "pwn",
        "pyu",
        "qu",
        "quc",
        "qug",
        "qya",
        "rar",
        "rgn",
        "rif",
        "rm",
        "rmy",
        "rn",
        "ro",
        "roa-tara",
        "ru",
        "rue",
        "rup",
        "ruq",
        "ruq-cyrl",
        "ruq-latn",
        "rw",
        "rwr",
        "sa",
        "sah",
        "sat",
        "sc",
        "scn",
        "sco",
        "sd",
        "sdc",
        "sdh",
        "se",
        "sei",
        "ses",
        "sg",
        "sgs",
        "sh",
        "shi",
        "shi-latn",
        "shi-tfng",
        "shn",
        "shy",
        "shy-latn",
        "si",
        "sia",
        "sjd",
        "sje",
        "sjk",
        "sjn",
        "sjt",
        "sju",
        "sk",
        "skr",
        "skr-arab",
        "sl",
        "sli",
        "sm",
        "sma",
        "smj",
        "smn",
        "sms",
        "sn",
        "so",
        "sq",
        "sr",
        "sr-ec",
        "sr-el",
        "srn",
        "srq",
        "ss",
        "ssf",
        "st",
        "stq",
        "sty",
        "su",
        "sv",
        "sw",
        "syc",
        "szl",
        "ta",
        "tay",
        "tcy",
        "te",
        "tet",
        "tg",
        "tg-cyrl",
        "tg-latn",
        "th",
        "ti",
        "tk",
        "tl",
        "tlb",
        "tly",
        "tn",
        "to",
        "tpi",
        "tr",
        "tru",
        "trv",
        "ts",
        "tt",
        "tt-cyrl",
        "tt-latn",
        "tum",
        "tw",
        "ty",
        "tyv",
        "tzl",
        "tzm",
        "udm",
        "ug",
        "ug-arab",
        "ug-latn",
        "uga",
        "uk",
        "umu",
        "und",
        "ur",
        "uun",
        "uz",
        "uz-cyrl",
        "uz-latn",
        "ve",
        "vec",
        "vep",
        "vi",
        "vls",
        "vmf",
        "vo",
        "vot",
        "vro",
        "wa",
        "war",
        "wo",
        "wuu",
        "xal",
        "xh",
        "xmf",
        "xpu",
        "xsy",
        "yap",
        "yi",
        "yo",
        "yue",
        "za",
        "zea",
        "zgh",
        "zh",
        "zh-cn",
        "zh-hans",
        "zh-hant",
        "zh-hk",
        "zh-mo",
        "zh-my",
        "zh-sg",
        "zh-tw",
        "zu",
        "zun",
        "zxx",
    ]
)
