"""
Lexical patterns for reading spoken Egyptian Arabic amounts.

Contains:
- Speech-recognition corrections (mis-hearings, dialect spellings, tense confusions)
- Currency words stripped before number extraction
- Number words, multipliers, fractions and multi-word number phrases
- Attached clitics that may prefix a number word
- Measurement units and fuel words used with quantity phrasing
"""

# Ordered (error, correction) pairs; applied in declaration order
SPEECH_CORRECTIONS = [
    # Currency spellings
    ("جنية", "جنيه"),
    ("جنيهات", "جنيه"),
    ("جنيهاً", "جنيه"),
    ("جنيها", "جنيه"),
    ("جنيهين", "2 جنيه"),

    # Final ت heard as ط
    ("صرفط", "صرفت"),
    ("دفعط", "دفعت"),
    ("اشتريط", "اشتريت"),
    ("قبضط", "قبضت"),
    ("استلمط", "استلمت"),

    # Hamza spellings produced by some engines
    ("إشتريت", "اشتريت"),
    ("إستلمت", "استلمت"),
    ("أشتريت", "اشتريت"),

    # Future / continuous heard for the past tense
    ("هصرف", "صرفت"),
    ("حصرف", "صرفت"),
    ("هدفع", "دفعت"),
    ("حدفع", "دفعت"),
    ("هشتري", "اشتريت"),
    ("حشتري", "اشتريت"),
    ("هاشتري", "اشتريت"),
    ("هقبض", "قبضت"),
    ("هستلم", "استلمت"),

    # Common mis-hearings of category words
    ("مرطب", "مرتب"),
    ("مواصلاط", "مواصلات"),
    ("مواصلة", "مواصلات"),
    ("تكسي", "تاكسي"),
    ("طاكسي", "تاكسي"),
    ("بنزينة", "بنزين"),
    ("سالاري", "راتب"),
]

CURRENCY_WORDS = [
    "جنيه", "جنيهات", "جنيها", "ج.م", "جم", "ج",
    "ريال", "ريالات", "ر.س",
    "درهم", "دراهم",
    "دولار", "دولارات",
    "pounds", "pound", "egp", "l.e", "le",
]

# Plain values: units, teens, tens and pre-composed hundreds / thousands
NUMBER_WORDS = {
    "صفر": 0, "zero": 0,

    # Units
    "واحد": 1, "واحدة": 1,
    "اتنين": 2, "اثنين": 2, "اثنان": 2,
    "تلاتة": 3, "ثلاثة": 3, "تلات": 3, "ثلاث": 3,
    "اربعة": 4, "أربعة": 4, "اربع": 4,
    "خمسة": 5, "خمس": 5,
    "ستة": 6, "ست": 6,
    "سبعة": 7, "سبع": 7,
    "تمانية": 8, "ثمانية": 8, "تمان": 8,
    "تسعة": 9, "تسع": 9,
    "عشرة": 10, "عشر": 10,

    # Teens
    "حداشر": 11, "اتناشر": 12, "تلتاشر": 13, "اربعتاشر": 14, "خمستاشر": 15,
    "ستاشر": 16, "سبعتاشر": 17, "تمنتاشر": 18, "تسعتاشر": 19,

    # Tens
    "عشرين": 20, "تلاتين": 30, "ثلاثين": 30, "اربعين": 40, "أربعين": 40,
    "خمسين": 50, "ستين": 60, "سبعين": 70, "تمانين": 80, "ثمانين": 80, "تسعين": 90,

    # Pre-composed hundreds
    "ميتين": 200, "مئتين": 200, "مائتين": 200,
    "تلتمية": 300, "ثلاثمائة": 300,
    "ربعمية": 400, "اربعمية": 400, "أربعمائة": 400,
    "خمسمية": 500, "خمسمائة": 500,
    "ستمية": 600, "ستمائة": 600,
    "سبعمية": 700, "سبعمائة": 700,
    "تمنمية": 800, "ثمانمائة": 800,
    "تسعمية": 900, "تسعمائة": 900,

    # Pre-composed thousands
    "الفين": 2000, "ألفين": 2000,
    "مليون": 1_000_000,

    # English number words spoken into an Arabic transcript
    "one": 1, "two": 2, "three": 3, "four": 4, "five": 5,
    "six": 6, "seven": 7, "eight": 8, "nine": 9, "ten": 10,
    "eleven": 11, "twelve": 12, "thirteen": 13, "fourteen": 14, "fifteen": 15,
    "sixteen": 16, "seventeen": 17, "eighteen": 18, "nineteen": 19,
    "twenty": 20, "thirty": 30, "forty": 40, "fifty": 50,
    "sixty": 60, "seventy": 70, "eighty": 80, "ninety": 90,
}

HUNDRED_WORDS = ["مية", "مائة", "مئة", "hundred"]

THOUSAND_WORDS = ["الف", "ألف", "آلاف", "الاف", "تلاف", "thousand"]

FRACTION_WORDS = {
    "نص": 0.5,
    "نصف": 0.5,
    "ربع": 0.25,
    "half": 0.5,
    "quarter": 0.25,
}

# Multi-word phrases matched before single words (longest window first)
NUMBER_PHRASES = {
    "احد عشر": 11,
    "اثنا عشر": 12,
    "اتنين الف": 2000,
    "مية ونص": 150,
    "الف ونص": 1500,
    "نص مية": 50,
    "ربع مية": 25,
    "نص الف": 500,
    "ربع الف": 250,
    "تلات تلاف": 3000,
}

# Attached prefixes stripped when a token is not itself a number word
CLITIC_PREFIXES = ["وبال", "وال", "بال", "وب", "ول", "ال", "ب", "و", "ل", "ف"]

WEIGHT_UNITS = ["كيلو", "كيلوجرام", "كجم", "جرام"]

VOLUME_UNITS = ["لتر", "لترات"]

COUNT_UNITS = ["علبة", "علب", "قطعة", "حبة", "كرتونة", "دستة", "كيس", "زجاجة", "ازازة"]

FUEL_WORDS = ["بنزين", "سولار", "وقود", "بنزينة"]

# Markers that introduce a unit price ("الكيلو ب 150", "اللتر بسعر 12")
UNIT_PRICE_MARKERS = ["بسعر", "سعره", "ب"]
