"""
Transaction classification patterns for spoken Egyptian Arabic statements.

Contains keyword tables for:
- Direction (expense and income verbs, nouns and idioms)
- Direction overrides (expense locations, income payment methods)
- Categories (standard, dialect and brand vocabulary per category)
- Context indicators (time, location, payment method, quantity)
- Context-based category hints
"""

# Expense verbs and nouns: standard forms, dialect conjugations and "money left" idioms
EXPENSE_KEYWORDS = [
    "صرف", "صرفت", "صرفنا", "مصروف", "مصروفات", "مصاريف",
    "دفع", "دفعت", "دفعنا", "ادفع", "بدفع", "بندفع",
    "اشترى", "اشتريت", "اشترينا", "شريت", "بشتري", "جبت", "جبنا",
    "انفق", "انفقت", "انفاق", "خرج", "خرجت",
    "سددت", "سداد", "حاسبت", "اتحسب", "اديت", "كلفني", "تكلفة",
    # Idioms
    "طلع مني", "طلعت مني", "راحت مني", "راحوا مني", "فلوس راحت", "خسرت",
]

# Income verbs and nouns: standard forms, dialect conjugations and "money arrived" idioms
INCOME_KEYWORDS = [
    "دخل", "دخلي", "دخلت فلوس",
    "استلم", "استلمت", "استلمنا", "بستلم",
    "وصل", "وصلني", "وصلتني", "وصلي",
    "ربح", "ربحت", "كسبت", "مكسب",
    "قبض", "قبضت", "قبضنا", "بقبض",
    "حصلت", "جالي", "جاني", "جتلي",
    "راتب", "مرتب", "مكافأة", "عيدية",
    # Idioms
    "نزل المرتب", "نزلي", "اتحولي", "اتحول لي", "حولولي",
    "فلوس جت", "جت فلوس", "اتدفعلي",
]

# A clause naming one of these places is always an expense
EXPENSE_LOCATION_WORDS = ["مطعم", "كافيه", "مول", "سوق", "ماركت", "سوبرماركت", "صيدلية", "محطة"]

# A clause naming one of these payment methods is income unless an expense location forced it
INCOME_PAYMENT_WORDS = ["تحويل", "حوالة", "شيك", "اتحول"]

# Category vocabulary, keyed by canonical category name
CATEGORY_PATTERNS = {
    "food": {
        "keywords": [
            "أكل", "اكل", "طعام", "غدا", "غداء", "فطار", "فطور", "عشاء", "العشا",
            "وجبة", "سندوتش", "ساندويتش", "فول", "طعمية", "كشري", "بيتزا", "برجر",
            "شاورما", "فراخ", "لحمة", "لحم", "سمك", "خضار", "فاكهة", "عيش",
            "رز", "سكر", "زيت", "لبن", "جبنة", "بقالة", "شاي", "قهوة",
            "مطعم", "كافيه", "عصير", "حلويات", "ماكدونالدز", "كنتاكي", "طلبات",
        ],
        "description": "Food & Dining",
    },

    "transport": {
        "keywords": [
            "مواصلات", "تاكسي", "اوبر", "كريم", "اندرايفر", "اتوبيس", "باص",
            "مترو", "ميكروباص", "توك توك", "القطر", "بنزين", "وقود", "سولار",
            "جراج", "ركنة", "كارتة", "تذكرة قطر", "uber", "careem",
        ],
        "description": "Transport & Fuel",
    },

    "bills": {
        "keywords": [
            "فواتير", "فاتورة", "كهرباء", "كهربا", "مياه", "المية", "غاز",
            "تليفون", "موبايل", "رصيد", "كارت شحن", "انترنت", "النت", "ايجار",
            "اشتراك", "فودافون", "اورنج", "اتصالات",
        ],
        "description": "Bills & Utilities",
    },

    "shopping": {
        "keywords": [
            "تسوق", "شراء", "ملابس", "هدوم", "حاجات", "سوبرماركت", "ماركت",
            "مول", "جزمة", "قميص", "بنطلون", "فستان", "شنطة", "امازون", "جوميا",
        ],
        "description": "Shopping",
    },

    "entertainment": {
        "keywords": [
            "سينما", "فيلم", "لعبة", "العاب", "ترفيه", "نادي", "كورة", "خروجة",
            "فسحة", "بلايستيشن", "نتفليكس", "حفلة", "ماتش",
        ],
        "description": "Entertainment",
    },

    "health": {
        "keywords": [
            "دكتور", "دوا", "دواء", "علاج", "صيدلية", "مستشفى", "كشف", "تحاليل",
            "اشعة", "عيادة", "اسنان", "نضارة",
        ],
        "description": "Health",
    },

    "education": {
        "keywords": [
            "مدرسة", "جامعة", "دروس", "درس خصوصي", "كورس", "كتب", "مصاريف الدراسة",
        ],
        "description": "Education",
    },

    "salary": {
        "keywords": ["راتب", "مرتب", "المرتب", "شغل", "عمل", "وظيفة"],
        "description": "Salary & Wages",
    },

    "freelance": {
        "keywords": ["فري لانس", "فريلانس", "شغل حر", "عمل حر", "مشروع", "اونلاين", "freelance", "upwork"],
        "description": "Freelance",
    },

    "business": {
        "keywords": ["تجارة", "بيع", "ربح", "محل", "ارباح", "مكسب"],
        "description": "Business",
    },

    "investment": {
        "keywords": ["استثمار", "فوايد", "فوائد", "شهادات", "البورصة", "اسهم", "عائد"],
        "description": "Investment",
    },

    "gift": {
        "keywords": ["هدية", "عيدية", "مناسبة", "نقطة"],
        "description": "Gifts",
    },
}

# Context indicator phrase lists
CONTEXT_INDICATORS = {
    "time": [
        "النهارده", "انهارده", "امبارح", "امس", "بكرة", "الصبح", "الصباح",
        "بالليل", "المسا", "الضهر", "العصر", "دلوقتي", "من شوية",
        "الاسبوع", "الشهر", "اليوم", "يوم", "ساعة", "today", "yesterday",
    ],
    "location": [
        "مطعم", "كافيه", "مول", "سوبرماركت", "ماركت", "السوق", "صيدلية",
        "مستشفى", "محطة", "البنزينة", "النادي", "البنك", "المحل", "الجمعية", "الفرن",
    ],
    "payment": [
        "كاش", "نقدي", "فيزا", "كارت", "بطاقة", "ماستر", "تحويل", "حوالة",
        "فودافون كاش", "انستاباي", "instapay", "محفظة", "شيك", "ميزة",
    ],
    "quantity": [
        "كيلو", "جرام", "لتر", "علبة", "علب", "قطعة", "حبة", "كرتونة",
        "دستة", "متر", "زجاجة", "ازازة", "كيس",
    ],
}

# Context-based category hints, tried only after keyword and fuzzy matching fail
LOCATION_CATEGORY_HINTS = {
    "food": ["مطعم", "كافيه", "كافيتريا", "قهوة", "الفرن"],
    "health": ["صيدلية", "مستشفى", "عيادة"],
    "shopping": ["مول", "سوق", "ماركت", "المحل"],
}
