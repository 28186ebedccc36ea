LANGUAGES = {
    "en": "EN",
    "fr": "FR",
    "ar": "AR",
}

RTL_LANGUAGES = {"ar"}

TRANSLATIONS = {
    "en": {
        # Landing
        "welcome": "Welcome to ALI",
        "subtitle": "Your travel assistant for CTM - Scan, Chat, and Order.",
        "talk": "Talk with Ali (CTM AI Assistant)",
        "close_chat": "Close chat",
        "order": "Order Food",
        "where_am_i": "How far is my destination?",
        # Food
        "food_title": "Restaurants Near You",
        "food_subtitle": "Choose a restaurant or check the menu and place your order.",
        "check_menu": "Check Menu",
        "hide_menu": "Hide Menu",
        "name_placeholder": "Your Name…",
        "menu_item": "Menu item",
        "notes_placeholder": "Add notes / changes…",
        "send_order": "Send Order",
        "order_sent": "Order sent for {restaurant}! (frontend only)",
        "home": "Home",
        # Location
        "location_title": "Distance to Destination",
        "location_subtitle": "Share your location and search for a place to get a rough travel time.",
        "latitude": "Latitude",
        "longitude": "Longitude",
        "destination_placeholder": "Where are you going? (e.g. Rabat)",
        "search": "Search",
        "distance": "Distance",
        "eta": "Estimated time",
        "eta_value": "{hours} h {minutes} min",
        "position_device": "Using your device location.",
        "position_live": "Using the location you shared.",
        "position_manual": "No shared location, using the coordinates below.",
        "query_too_long": "Please shorten the place name to {limit} characters.",
        "lookup_unavailable": "Lookup unavailable, please try again.",
        "lookup_unresolved": "No place found for that name.",
        "awaiting_position": "Destination found, waiting for your location.",
        "lookup_resolved": "Destination found.",
        "estimate_note": "Straight-line distance at an average of {speed} km/h.",
    },
    "fr": {
        "welcome": "Bienvenue sur ALI",
        "subtitle": "Votre assistant de voyage pour CTM - Scannez, discutez et commandez.",
        "talk": "Parlez avec Ali (Assistant IA CTM)",
        "close_chat": "Fermer le chat",
        "order": "Commander de la nourriture",
        "where_am_i": "À quelle distance est ma destination ?",
        "food_title": "Restaurants Près de Chez Vous",
        "food_subtitle": "Choisis un restaurant ou consulte le menu et passe ta commande.",
        "check_menu": "Voir le menu",
        "hide_menu": "Cacher le menu",
        "name_placeholder": "Votre nom…",
        "menu_item": "Plat",
        "notes_placeholder": "Ajouter des remarques / modifications…",
        "send_order": "Envoyer la commande",
        "order_sent": "Commande envoyée pour {restaurant} ! (frontend uniquement)",
        "home": "Accueil",
        "location_title": "Distance jusqu'à la destination",
        "location_subtitle": "Partagez votre position et cherchez un lieu pour obtenir un temps de trajet approximatif.",
        "latitude": "Latitude",
        "longitude": "Longitude",
        "destination_placeholder": "Où allez-vous ? (ex. Rabat)",
        "search": "Rechercher",
        "distance": "Distance",
        "eta": "Temps estimé",
        "eta_value": "{hours} h {minutes} min",
        "position_device": "Position de votre appareil utilisée.",
        "position_live": "Position partagée utilisée.",
        "position_manual": "Aucune position partagée, coordonnées ci-dessous utilisées.",
        "query_too_long": "Veuillez raccourcir le nom du lieu à {limit} caractères.",
        "lookup_unavailable": "Recherche indisponible, veuillez réessayer.",
        "lookup_unresolved": "Aucun lieu trouvé pour ce nom.",
        "awaiting_position": "Destination trouvée, en attente de votre position.",
        "lookup_resolved": "Destination trouvée.",
        "estimate_note": "Distance à vol d'oiseau à une moyenne de {speed} km/h.",
    },
    "ar": {
        "welcome": "مرحبًا بك في ALI",
        "subtitle": "مساعدك في السفر لـ CTM - مسح، محادثة، وطلب.",
        "talk": "تحدث مع علي (مساعد الذكاء الاصطناعي CTM)",
        "close_chat": "إغلاق المحادثة",
        "order": "اطلب الطعام",
        "where_am_i": "كم تبعد وجهتي؟",
        "food_title": "المطاعم القريبة منك",
        "food_subtitle": "اختر مطعم أو شاهد قائمة الطعام واطلب طلبك.",
        "check_menu": "عرض القائمة",
        "hide_menu": "إخفاء القائمة",
        "name_placeholder": "اسمك…",
        "menu_item": "الطبق",
        "notes_placeholder": "أضف ملاحظات / تغييرات…",
        "send_order": "إرسال الطلب",
        "order_sent": "تم إرسال الطلب إلى {restaurant}! (واجهة فقط)",
        "home": "الرئيسية",
        "location_title": "المسافة إلى الوجهة",
        "location_subtitle": "شارك موقعك وابحث عن مكان للحصول على وقت تقريبي للرحلة.",
        "latitude": "خط العرض",
        "longitude": "خط الطول",
        "destination_placeholder": "إلى أين تذهب؟ (مثال: الرباط)",
        "search": "بحث",
        "distance": "المسافة",
        "eta": "الوقت المقدر",
        "eta_value": "{hours} س {minutes} د",
        "position_device": "يتم استخدام موقع جهازك.",
        "position_live": "يتم استخدام الموقع الذي شاركته.",
        "position_manual": "لا يوجد موقع مشترك، يتم استخدام الإحداثيات أدناه.",
        "query_too_long": "يرجى اختصار اسم المكان إلى {limit} حرفًا.",
        "lookup_unavailable": "البحث غير متاح، يرجى المحاولة مرة أخرى.",
        "lookup_unresolved": "لم يتم العثور على مكان بهذا الاسم.",
        "awaiting_position": "تم العثور على الوجهة، في انتظار موقعك.",
        "lookup_resolved": "تم العثور على الوجهة.",
        "estimate_note": "مسافة خط مستقيم بمتوسط {speed} كم/س.",
    },
}

FOOTER = "© 2025 ALI — CTM Inspired"


def translate(language: str, key: str, **kwargs) -> str:
    """
    Looks up a UI string. Unknown languages fall back to English,
    unknown keys raise KeyError.
    """
    strings = TRANSLATIONS.get(language, TRANSLATIONS["en"])
    text = strings[key]
    return text.format(**kwargs) if kwargs else text


def is_rtl(language: str) -> bool:
    return language in RTL_LANGUAGES
