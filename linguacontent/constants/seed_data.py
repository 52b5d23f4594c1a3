LANGUAGES = [
    {"code": "en", "name": "English", "native_name": "English", "rtl": False},
    {"code": "ar", "name": "Arabic", "native_name": "العربية", "rtl": True},
    {"code": "fr", "name": "French", "native_name": "Français", "rtl": False},
    {"code": "es", "name": "Spanish", "native_name": "Español", "rtl": False},
    {"code": "de", "name": "German", "native_name": "Deutsch", "rtl": False},
]


CATEGORIES = [
    {
        "slug": "daily-conversations",
        "translations": {
            "en": {"name": "Daily Conversations", "description": "Everyday phrases for greetings, shopping and small talk"},
            "ar": {"name": "المحادثات اليومية", "description": "عبارات يومية للتحية والتسوق والأحاديث القصيرة"},
            "fr": {"name": "Conversations Quotidiennes", "description": "Phrases de tous les jours pour saluer, faire des achats et discuter"},
            "es": {"name": "Conversaciones Diarias", "description": "Frases cotidianas para saludar, comprar y conversar"},
            "de": {"name": "Alltagsgespräche", "description": "Alltägliche Redewendungen zum Begrüßen, Einkaufen und Plaudern"},
        },
    },
    {
        "slug": "travel-guide",
        "translations": {
            "en": {"name": "Travel Guide", "description": "Essential phrases for travelers"},
            "ar": {"name": "دليل السفر", "description": "العبارات الأساسية للمسافرين"},
            "fr": {"name": "Guide de Voyage", "description": "Phrases essentielles pour les voyageurs"},
            "es": {"name": "Guía de Viaje", "description": "Frases esenciales para viajeros"},
            "de": {"name": "Reiseführer", "description": "Wesentliche Redewendungen für Reisende"},
        },
    },
    {
        "slug": "food-and-cuisine",
        "translations": {
            "en": {"name": "Food and Cuisine", "description": "Culinary vocabulary and food-related expressions"},
            "ar": {"name": "الطعام والمطبخ", "description": "المفردات الطهي والتعبيرات المتعلقة بالطعام"},
            "fr": {"name": "Nourriture et Cuisine", "description": "Vocabulaire culinaire et expressions liées à la nourriture"},
            "es": {"name": "Comida y Cocina", "description": "Vocabulario culinario y expresiones relacionadas con la comida"},
            "de": {"name": "Essen und Küche", "description": "Kulinarisches Vokabular und Ausdrücke rund ums Essen"},
        },
    },
    {
        "slug": "culture-and-traditions",
        "translations": {
            "en": {"name": "Culture and Traditions", "description": "Learn about cultural practices and traditions"},
            "ar": {"name": "الثقافة والتقاليد", "description": "تعرف على الممارسات الثقافية والتقاليد"},
            "fr": {"name": "Culture et Traditions", "description": "Découvrez les pratiques culturelles et les traditions"},
            "es": {"name": "Cultura y Tradiciones", "description": "Aprende sobre prácticas culturales y tradiciones"},
            "de": {"name": "Kultur und Traditionen", "description": "Erfahren Sie mehr über kulturelle Praktiken und Traditionen"},
        },
    },
    {
        "slug": "business-communication",
        "translations": {
            "en": {"name": "Business Communication", "description": "Professional language for work and business"},
            "ar": {"name": "التواصل التجاري", "description": "لغة احترافية للعمل والأعمال التجارية"},
            "fr": {"name": "Communication d'Affaires", "description": "Langage professionnel pour le travail et les affaires"},
            "es": {"name": "Comunicación Empresarial", "description": "Lenguaje profesional para el trabajo y los negocios"},
            "de": {"name": "Geschäftskommunikation", "description": "Professionelle Sprache für Arbeit und Geschäft"},
        },
    },
    {
        "slug": "academic-language",
        "translations": {
            "en": {"name": "Academic Language", "description": "Vocabulary for education and academic settings"},
            "ar": {"name": "اللغة الأكاديمية", "description": "مفردات للتعليم والأوساط الأكاديمية"},
            "fr": {"name": "Langage Académique", "description": "Vocabulaire pour l'éducation et les milieux académiques"},
            "es": {"name": "Lenguaje Académico", "description": "Vocabulario para educación y entornos académicos"},
            "de": {"name": "Akademische Sprache", "description": "Vokabular für Bildung und akademische Umgebungen"},
        },
    },
    # Dialect categories only carry English and Arabic names
    {
        "slug": "levantine-dialect",
        "translations": {
            "en": {"name": "Levantine Arabic", "description": "Learn the dialect of Syria, Lebanon, Palestine, and Jordan"},
            "ar": {"name": "اللهجة الشامية", "description": "تعلم لهجة سوريا ولبنان وفلسطين والأردن"},
        },
    },
    {
        "slug": "egyptian-dialect",
        "translations": {
            "en": {"name": "Egyptian Arabic", "description": "Master the most widely understood Arabic dialect"},
            "ar": {"name": "اللهجة المصرية", "description": "إتقان اللهجة العربية الأكثر فهماً"},
        },
    },
]


SUBJECTS = {
    "daily-conversations": [
        {
            "slug": "greetings-and-introductions",
            "translations": {
                "en": {"name": "Greetings and Introductions", "description": "Common ways to greet people and introduce yourself"},
                "ar": {"name": "التحيات والمقدمات", "description": "طرق شائعة لتحية الناس وتقديم نفسك"},
                "fr": {"name": "Salutations et Présentations", "description": "Façons courantes de saluer les gens et de vous présenter"},
                "es": {"name": "Saludos y Presentaciones", "description": "Formas comunes de saludar a la gente y presentarte"},
                "de": {"name": "Begrüßungen und Vorstellungen", "description": "Übliche Arten, Leute zu begrüßen und sich vorzustellen"},
            },
        },
        {
            "slug": "shopping-and-services",
            "translations": {
                "en": {"name": "Shopping and Services", "description": "Useful phrases for shopping and using services"},
                "ar": {"name": "التسوق والخدمات", "description": "عبارات مفيدة للتسوق واستخدام الخدمات"},
                "fr": {"name": "Shopping et Services", "description": "Phrases utiles pour faire des achats et utiliser des services"},
                "es": {"name": "Compras y Servicios", "description": "Frases útiles para comprar y utilizar servicios"},
                "de": {"name": "Einkaufen und Dienstleistungen", "description": "Nützliche Redewendungen zum Einkaufen und zur Nutzung von Dienstleistungen"},
            },
        },
    ],
    "travel-guide": [
        {
            "slug": "at-the-airport",
            "translations": {
                "en": {"name": "At the Airport", "description": "Phrases to use at the airport"},
                "ar": {"name": "في المطار", "description": "عبارات للاستخدام في المطار"},
                "fr": {"name": "À l'Aéroport", "description": "Phrases à utiliser à l'aéroport"},
                "es": {"name": "En el Aeropuerto", "description": "Frases para usar en el aeropuerto"},
                "de": {"name": "Am Flughafen", "description": "Redewendungen für den Flughafen"},
            },
        },
        {
            "slug": "public-transportation",
            "translations": {
                "en": {"name": "Public Transportation", "description": "How to navigate public transport in different countries"},
                "ar": {"name": "وسائل النقل العام", "description": "كيفية التنقل في وسائل النقل العام في بلدان مختلفة"},
                "fr": {"name": "Transports Publics", "description": "Comment naviguer dans les transports publics dans différents pays"},
                "es": {"name": "Transporte Público", "description": "Cómo navegar por el transporte público en diferentes países"},
                "de": {"name": "Öffentliche Verkehrsmittel", "description": "Wie man sich in verschiedenen Ländern mit öffentlichen Verkehrsmitteln zurechtfindet"},
            },
        },
    ],
    "food-and-cuisine": [
        {
            "slug": "ordering-at-restaurants",
            "translations": {
                "en": {"name": "Ordering at Restaurants", "description": "Phrases to use when ordering food"},
                "ar": {"name": "الطلب في المطاعم", "description": "عبارات تستخدم عند طلب الطعام"},
                "fr": {"name": "Commander au Restaurant", "description": "Phrases à utiliser lors de la commande de nourriture"},
                "es": {"name": "Ordenar en Restaurantes", "description": "Frases para usar al ordenar comida"},
                "de": {"name": "Bestellen im Restaurant", "description": "Redewendungen zum Bestellen von Speisen"},
            },
        },
        {
            "slug": "popular-dishes",
            "translations": {
                "en": {"name": "Popular Dishes", "description": "Learn about famous dishes from around the world"},
                "ar": {"name": "الأطباق الشعبية", "description": "تعرف على الأطباق الشهيرة من جميع أنحاء العالم"},
                "fr": {"name": "Plats Populaires", "description": "Découvrez des plats célèbres du monde entier"},
                "es": {"name": "Platos Populares", "description": "Aprende sobre platos famosos de todo el mundo"},
                "de": {"name": "Beliebte Gerichte", "description": "Erfahren Sie mehr über berühmte Gerichte aus aller Welt"},
            },
        },
    ],
    "culture-and-traditions": [
        {
            "slug": "holidays-and-celebrations",
            "translations": {
                "en": {"name": "Holidays and Celebrations", "description": "Important holidays and how they are celebrated"},
                "ar": {"name": "العطلات والاحتفالات", "description": "العطلات المهمة وكيفية الاحتفال بها"},
                "fr": {"name": "Fêtes et Célébrations", "description": "Fêtes importantes et comment elles sont célébrées"},
                "es": {"name": "Festividades y Celebraciones", "description": "Festividades importantes y cómo se celebran"},
                "de": {"name": "Feiertage und Feierlichkeiten", "description": "Wichtige Feiertage und wie sie gefeiert werden"},
            },
        },
        {
            "slug": "customs-and-etiquette",
            "translations": {
                "en": {"name": "Customs and Etiquette", "description": "Cultural norms and expected behaviors"},
                "ar": {"name": "العادات وآداب السلوك", "description": "الأعراف الثقافية والسلوكيات المتوقعة"},
                "fr": {"name": "Coutumes et Étiquette", "description": "Normes culturelles et comportements attendus"},
                "es": {"name": "Costumbres y Etiqueta", "description": "Normas culturales y comportamientos esperados"},
                "de": {"name": "Bräuche und Etikette", "description": "Kulturelle Normen und erwartetes Verhalten"},
            },
        },
    ],
    "business-communication": [
        {
            "slug": "business-meetings",
            "translations": {
                "en": {"name": "Business Meetings", "description": "Language for effective meetings and presentations"},
                "ar": {"name": "اجتماعات العمل", "description": "لغة للاجتماعات والعروض التقديمية الفعالة"},
                "fr": {"name": "Réunions d'Affaires", "description": "Langage pour des réunions et présentations efficaces"},
                "es": {"name": "Reuniones de Negocios", "description": "Lenguaje para reuniones y presentaciones efectivas"},
                "de": {"name": "Geschäftstreffen", "description": "Sprache für effektive Meetings und Präsentationen"},
            },
        },
        {
            "slug": "emails-and-correspondence",
            "translations": {
                "en": {"name": "Emails and Correspondence", "description": "How to write professional emails and letters"},
                "ar": {"name": "البريد الإلكتروني والمراسلات", "description": "كيفية كتابة رسائل البريد الإلكتروني والخطابات المهنية"},
                "fr": {"name": "Emails et Correspondance", "description": "Comment rédiger des emails et lettres professionnels"},
                "es": {"name": "Correos y Correspondencia", "description": "Cómo escribir correos electrónicos y cartas profesionales"},
                "de": {"name": "E-Mails und Korrespondenz", "description": "Wie man professionelle E-Mails und Briefe schreibt"},
            },
        },
    ],
    "academic-language": [
        {
            "slug": "classroom-vocabulary",
            "translations": {
                "en": {"name": "Classroom Vocabulary", "description": "Essential terms for educational settings"},
                "ar": {"name": "مفردات الفصل الدراسي", "description": "المصطلحات الأساسية للبيئات التعليمية"},
                "fr": {"name": "Vocabulaire de Classe", "description": "Termes essentiels pour les contextes éducatifs"},
                "es": {"name": "Vocabulario del Aula", "description": "Términos esenciales para entornos educativos"},
                "de": {"name": "Klassenzimmer-Vokabular", "description": "Wesentliche Begriffe für Bildungsumgebungen"},
            },
        },
        {
            "slug": "academic-writing",
            "translations": {
                "en": {"name": "Academic Writing", "description": "How to write essays and research papers"},
                "ar": {"name": "الكتابة الأكاديمية", "description": "كيفية كتابة المقالات وأوراق البحث"},
                "fr": {"name": "Rédaction Académique", "description": "Comment rédiger des essais et des articles de recherche"},
                "es": {"name": "Escritura Académica", "description": "Cómo escribir ensayos y trabajos de investigación"},
                "de": {"name": "Akademisches Schreiben", "description": "Wie man Essays und Forschungsarbeiten schreibt"},
            },
        },
    ],
}


def _body(title: str, lead: str) -> str:
    return f"<h2>{title}</h2>\n<p>{lead}</p>"


# Every seeded article carries all five languages. Titles and notes follow the
# published catalogue; bodies are the lead paragraph of each piece.
ARTICLES = {
    "greetings-and-introductions": [
        {
            "slug": "common-greetings",
            "translations": {
                "en": {
                    "title": "Common Greetings in Different Languages",
                    "content": _body("Saying Hello Around the World",
                                     "A greeting is the first step of every conversation. Learn how people say hello, "
                                     "good morning and goodbye, and when a formal greeting is expected."),
                    "notes": "Focus on the difference between formal and informal greetings.",
                },
                "ar": {
                    "title": "التحيات الشائعة بلغات مختلفة",
                    "content": _body("التحية حول العالم", "التحية هي الخطوة الأولى في كل محادثة."),
                    "notes": "ركز على الفرق بين التحيات الرسمية وغير الرسمية.",
                },
                "fr": {
                    "title": "Salutations courantes dans différentes langues",
                    "content": _body("Dire bonjour à travers le monde", "La salutation est la première étape de toute conversation."),
                    "notes": "Concentrez-vous sur la différence entre les salutations formelles et informelles.",
                },
                "es": {
                    "title": "Saludos comunes en diferentes idiomas",
                    "content": _body("Saludar en todo el mundo", "El saludo es el primer paso de toda conversación."),
                    "notes": "Concéntrese en la diferencia entre saludos formales e informales.",
                },
                "de": {
                    "title": "Gängige Begrüßungen in verschiedenen Sprachen",
                    "content": _body("Hallo sagen rund um die Welt", "Die Begrüßung ist der erste Schritt jedes Gesprächs."),
                    "notes": "Konzentrieren Sie sich auf den Unterschied zwischen formellen und informellen Begrüßungen.",
                },
            },
        },
    ],
    "shopping-and-services": [
        {
            "slug": "bargaining-phrases",
            "translations": {
                "en": {
                    "title": "Essential Bargaining Phrases for Markets",
                    "content": _body("Negotiating Prices with Confidence",
                                     "In many markets the first price is only the start of the conversation. "
                                     "These phrases help you ask for a discount politely."),
                    "notes": "Practice these phrases before visiting a local market.",
                },
                "ar": {
                    "title": "عبارات المساومة الأساسية للأسواق",
                    "content": _body("التفاوض على الأسعار بثقة", "في كثير من الأسواق يكون السعر الأول بداية الحديث فقط."),
                    "notes": "تدرب على هذه العبارات قبل زيارة السوق المحلي.",
                },
                "fr": {
                    "title": "Phrases essentielles de marchandage pour les marchés",
                    "content": _body("Négocier les prix avec assurance", "Sur de nombreux marchés, le premier prix n'est qu'un début."),
                    "notes": "Entraînez-vous à ces phrases avant de visiter un marché local.",
                },
                "es": {
                    "title": "Frases esenciales para regatear en mercados",
                    "content": _body("Negociar precios con confianza", "En muchos mercados el primer precio es solo el comienzo."),
                    "notes": "Practica estas frases antes de visitar un mercado local.",
                },
                "de": {
                    "title": "Wesentliche Feilsch-Phrasen für Märkte",
                    "content": _body("Selbstbewusst Preise verhandeln", "Auf vielen Märkten ist der erste Preis nur der Anfang."),
                    "notes": "Üben Sie diese Phrasen, bevor Sie einen lokalen Markt besuchen.",
                },
            },
        },
    ],
    "at-the-airport": [
        {
            "slug": "airport-navigation",
            "translations": {
                "en": {
                    "title": "Navigating Airports: Essential Vocabulary",
                    "content": _body("From Check-in to Boarding",
                                     "Airports follow the same routine everywhere: check-in, security, passport control "
                                     "and the gate. Knowing the words for each step makes travel calmer."),
                    "notes": "Memorize these terms before your next international flight.",
                },
                "ar": {
                    "title": "التنقل في المطارات: المفردات الأساسية",
                    "content": _body("من تسجيل الوصول إلى الصعود", "تتبع المطارات الروتين نفسه في كل مكان."),
                    "notes": "احفظ هذه المصطلحات قبل رحلتك الدولية القادمة.",
                },
                "fr": {
                    "title": "Naviguer dans les aéroports : Vocabulaire essentiel",
                    "content": _body("De l'enregistrement à l'embarquement", "Les aéroports suivent partout la même routine."),
                    "notes": "Mémorisez ces termes avant votre prochain vol international.",
                },
                "es": {
                    "title": "Navegando por aeropuertos: Vocabulario esencial",
                    "content": _body("De la facturación al embarque", "Los aeropuertos siguen la misma rutina en todas partes."),
                    "notes": "Memoriza estos términos antes de tu próximo vuelo internacional.",
                },
                "de": {
                    "title": "Navigation auf Flughäfen: Wichtiger Wortschatz",
                    "content": _body("Vom Check-in bis zum Boarding", "Flughäfen folgen überall derselben Routine."),
                    "notes": "Merken Sie sich diese Begriffe vor Ihrem nächsten internationalen Flug.",
                },
            },
        },
    ],
    "public-transportation": [
        {
            "slug": "transportation-phrases",
            "translations": {
                "en": {
                    "title": "Essential Phrases for Public Transportation",
                    "content": _body("Getting Around Like a Local",
                                     "Buses, trams and metros are the cheapest way to explore a city. "
                                     "Learn how to buy a ticket and ask which stop is yours."),
                    "notes": "Practice these phrases before using public transport in a foreign country.",
                },
                "ar": {
                    "title": "العبارات الأساسية لوسائل النقل العام",
                    "content": _body("التنقل مثل السكان المحليين", "الحافلات والمترو هي أرخص طريقة لاستكشاف المدينة."),
                    "notes": "تدرب على هذه العبارات قبل استخدام وسائل النقل العام في بلد أجنبي.",
                },
                "fr": {
                    "title": "Phrases essentielles pour les transports en commun",
                    "content": _body("Se déplacer comme un local", "Les bus et le métro sont le moyen le moins cher de visiter une ville."),
                    "notes": "Entraînez-vous à ces phrases avant d'utiliser les transports en commun dans un pays étranger.",
                },
                "es": {
                    "title": "Frases esenciales para el transporte público",
                    "content": _body("Moverse como un local", "El autobús y el metro son la forma más barata de recorrer una ciudad."),
                    "notes": "Practica estas frases antes de usar el transporte público en un país extranjero.",
                },
                "de": {
                    "title": "Wesentliche Redewendungen für öffentliche Verkehrsmittel",
                    "content": _body("Unterwegs wie die Einheimischen", "Bus und U-Bahn sind der günstigste Weg, eine Stadt zu erkunden."),
                    "notes": "Üben Sie diese Sätze, bevor Sie öffentliche Verkehrsmittel in einem fremden Land benutzen.",
                },
            },
        },
    ],
    "ordering-at-restaurants": [
        {
            "slug": "restaurant-phrases",
            "translations": {
                "en": {
                    "title": "How to Order Food in a Restaurant",
                    "content": _body("From Menu to Bill",
                                     "Asking for a table, ordering a dish and requesting the bill are the three "
                                     "moments every traveler meets in a restaurant."),
                    "notes": "Learn these phrases to order confidently when traveling abroad.",
                },
                "ar": {
                    "title": "كيفية طلب الطعام في مطعم",
                    "content": _body("من القائمة إلى الفاتورة", "طلب طاولة وطلب طبق وطلب الفاتورة لحظات يمر بها كل مسافر."),
                    "notes": "تعلم هذه العبارات للطلب بثقة عند السفر إلى الخارج.",
                },
                "fr": {
                    "title": "Comment commander dans un restaurant",
                    "content": _body("Du menu à l'addition", "Demander une table, commander un plat et demander l'addition."),
                    "notes": "Apprenez ces phrases pour commander avec confiance lors de voyages à l'étranger.",
                },
                "es": {
                    "title": "Cómo pedir comida en un restaurante",
                    "content": _body("Del menú a la cuenta", "Pedir mesa, pedir un plato y pedir la cuenta."),
                    "notes": "Aprende estas frases para pedir con confianza cuando viajes al extranjero.",
                },
                "de": {
                    "title": "Wie man in einem Restaurant bestellt",
                    "content": _body("Von der Speisekarte zur Rechnung", "Einen Tisch verlangen, ein Gericht bestellen und um die Rechnung bitten."),
                    "notes": "Lernen Sie diese Sätze, um bei Reisen ins Ausland selbstbewusst zu bestellen.",
                },
            },
        },
    ],
    "popular-dishes": [
        {
            "slug": "international-cuisine",
            "translations": {
                "en": {
                    "title": "Popular Dishes Around the World",
                    "content": _body("A Culinary Tour",
                                     "From paella to sushi, national dishes tell the story of a country. "
                                     "Knowing their names helps you read any menu."),
                    "notes": "Research local specialties before your next trip to enhance your culinary experience.",
                },
                "ar": {
                    "title": "الأطباق الشعبية حول العالم",
                    "content": _body("جولة في المطابخ", "الأطباق الوطنية تحكي قصة البلد."),
                    "notes": "ابحث عن التخصصات المحلية قبل رحلتك القادمة لتعزيز تجربتك الطهي.",
                },
                "fr": {
                    "title": "Plats populaires à travers le monde",
                    "content": _body("Un tour culinaire", "Les plats nationaux racontent l'histoire d'un pays."),
                    "notes": "Recherchez les spécialités locales avant votre prochain voyage pour améliorer votre expérience culinaire.",
                },
                "es": {
                    "title": "Platos populares alrededor del mundo",
                    "content": _body("Un recorrido culinario", "Los platos nacionales cuentan la historia de un país."),
                    "notes": "Investiga especialidades locales antes de tu próximo viaje para mejorar tu experiencia culinaria.",
                },
                "de": {
                    "title": "Beliebte Gerichte aus aller Welt",
                    "content": _body("Eine kulinarische Reise", "Nationalgerichte erzählen die Geschichte eines Landes."),
                    "notes": "Recherchieren Sie lokale Spezialitäten vor Ihrer nächsten Reise, um Ihr kulinarisches Erlebnis zu verbessern.",
                },
            },
        },
    ],
    "holidays-and-celebrations": [
        {
            "slug": "global-holidays",
            "translations": {
                "en": {
                    "title": "Major Holidays Around the World",
                    "content": _body("Celebrations That Bring People Together",
                                     "New Year, Eid, Diwali and Lunar New Year are celebrated by millions. "
                                     "Each comes with its own greetings and customs."),
                    "notes": "Consider planning a trip to coincide with a local festival for a more immersive cultural experience.",
                },
                "ar": {
                    "title": "الأعياد الرئيسية حول العالم",
                    "content": _body("احتفالات تجمع الناس", "يحتفل الملايين برأس السنة والعيد وديوالي."),
                    "notes": "فكر في التخطيط لرحلة لتتزامن مع مهرجان محلي للحصول على تجربة ثقافية أكثر شمولاً.",
                },
                "fr": {
                    "title": "Grandes fêtes à travers le monde",
                    "content": _body("Des fêtes qui rassemblent", "Le Nouvel An, l'Aïd et Diwali sont célébrés par des millions de personnes."),
                    "notes": "Envisagez de planifier un voyage pour coïncider avec un festival local pour une expérience culturelle plus immersive.",
                },
                "es": {
                    "title": "Festividades principales alrededor del mundo",
                    "content": _body("Celebraciones que unen", "Año Nuevo, Eid y Diwali son celebrados por millones de personas."),
                    "notes": "Considera planificar un viaje para que coincida con un festival local para una experiencia cultural más inmersiva.",
                },
                "de": {
                    "title": "Wichtige Feiertage rund um die Welt",
                    "content": _body("Feste, die Menschen verbinden", "Neujahr, Eid und Diwali werden von Millionen gefeiert."),
                    "notes": "Erwägen Sie, eine Reise so zu planen, dass sie mit einem lokalen Festival zusammenfällt, um ein intensiveres kulturelles Erlebnis zu haben.",
                },
            },
        },
    ],
    "customs-and-etiquette": [
        {
            "slug": "cultural-dos-and-donts",
            "translations": {
                "en": {
                    "title": "Cultural Do's and Don'ts Around the World",
                    "content": _body("Respecting Local Customs",
                                     "A gesture that is friendly at home can be rude abroad. "
                                     "Learn the basics of greeting, dining and gift etiquette."),
                    "notes": "Research specific etiquette for countries you plan to visit to show respect for local customs.",
                },
                "ar": {
                    "title": "ما يجب وما لا يجب فعله ثقافيًا حول العالم",
                    "content": _body("احترام العادات المحلية", "الإيماءة الودية في بلدك قد تكون وقحة في الخارج."),
                    "notes": "ابحث في آداب السلوك المحددة للبلدان التي تخطط لزيارتها لإظهار الاحترام للعادات المحلية.",
                },
                "fr": {
                    "title": "À faire et à ne pas faire culturellement à travers le monde",
                    "content": _body("Respecter les coutumes locales", "Un geste amical chez vous peut être impoli à l'étranger."),
                    "notes": "Recherchez l'étiquette spécifique pour les pays que vous prévoyez de visiter afin de montrer du respect pour les coutumes locales.",
                },
                "es": {
                    "title": "Lo que se debe y no se debe hacer culturalmente alrededor del mundo",
                    "content": _body("Respetar las costumbres locales", "Un gesto amable en casa puede ser grosero en el extranjero."),
                    "notes": "Investiga la etiqueta específica para los países que planeas visitar para mostrar respeto por las costumbres locales.",
                },
                "de": {
                    "title": "Kulturelle Dos und Don'ts rund um die Welt",
                    "content": _body("Lokale Bräuche respektieren", "Eine freundliche Geste zu Hause kann im Ausland unhöflich sein."),
                    "notes": "Recherchieren Sie spezifische Etikette für Länder, die Sie besuchen möchten, um Respekt für lokale Bräuche zu zeigen.",
                },
            },
        },
    ],
    "business-meetings": [
        {
            "slug": "effective-presentations",
            "translations": {
                "en": {
                    "title": "Effective Business Presentations",
                    "content": _body("Communicating with Impact in Business Settings",
                                     "Delivering effective presentations is a critical skill in business environments. "
                                     "Whether you're pitching to clients or leading a team meeting, clear communication is essential."),
                    "notes": "Practice these phrases to build confidence in business presentations.",
                },
                "ar": {
                    "title": "عروض تقديمية تجارية فعالة",
                    "content": _body("التواصل بتأثير في بيئات الأعمال", "تقديم عروض فعالة هو مهارة حاسمة في بيئات الأعمال."),
                    "notes": "مارس هذه العبارات لبناء الثقة في العروض التقديمية التجارية.",
                },
                "fr": {
                    "title": "Présentations d'Affaires Efficaces",
                    "content": _body("Communiquer avec Impact dans les Environnements d'Affaires",
                                     "Réaliser des présentations efficaces est une compétence cruciale dans les environnements d'affaires."),
                    "notes": "Pratiquez ces phrases pour renforcer la confiance dans les présentations d'affaires.",
                },
                "es": {
                    "title": "Presentaciones Empresariales Efectivas",
                    "content": _body("Comunicación con Impacto en Entornos Empresariales",
                                     "Realizar presentaciones efectivas es una habilidad crítica en entornos empresariales."),
                    "notes": "Practica estas frases para desarrollar confianza en presentaciones empresariales.",
                },
                "de": {
                    "title": "Effektive Geschäftspräsentationen",
                    "content": _body("Wirkungsvolle Kommunikation im Geschäftsumfeld",
                                     "Effektive Präsentationen zu halten ist eine entscheidende Fähigkeit im Geschäftsumfeld."),
                    "notes": "Üben Sie diese Phrasen, um Selbstvertrauen bei Geschäftspräsentationen aufzubauen.",
                },
            },
        },
    ],
    "emails-and-correspondence": [
        {
            "slug": "professional-email-writing",
            "translations": {
                "en": {
                    "title": "Writing Professional Business Emails",
                    "content": _body("Effective Email Communication",
                                     "In today's digital workplace, writing clear and professional emails is an essential skill. "
                                     "Your email communication often shapes how colleagues perceive your professionalism."),
                    "notes": "Remember to adapt your style based on your relationship with the recipient.",
                },
                "ar": {
                    "title": "كتابة رسائل البريد الإلكتروني المهنية",
                    "content": _body("التواصل الفعال عبر البريد الإلكتروني",
                                     "في مكان العمل الرقمي اليوم، تعد كتابة رسائل البريد الإلكتروني الواضحة والمهنية مهارة أساسية."),
                    "notes": "تذكر أن تكيف أسلوبك بناءً على علاقتك مع المستلم.",
                },
                "fr": {
                    "title": "Rédaction d'Emails Professionnels",
                    "content": _body("Communication Efficace par Email",
                                     "Dans le milieu professionnel numérique d'aujourd'hui, la rédaction d'emails clairs est une compétence essentielle."),
                    "notes": "N'oubliez pas d'adapter votre style en fonction de votre relation avec le destinataire.",
                },
                "es": {
                    "title": "Redacción de Correos Electrónicos Profesionales",
                    "content": _body("Comunicación Efectiva por Correo Electrónico",
                                     "En el lugar de trabajo digital actual, escribir correos claros y profesionales es una habilidad esencial."),
                    "notes": "Recuerda adaptar tu estilo según tu relación con el destinatario.",
                },
                "de": {
                    "title": "Professionelle Geschäfts-E-Mails verfassen",
                    "content": _body("Effektive E-Mail-Kommunikation",
                                     "Am digitalen Arbeitsplatz ist das Verfassen klarer und professioneller E-Mails eine wesentliche Fähigkeit."),
                    "notes": "Denken Sie daran, Ihren Stil an Ihre Beziehung zum Empfänger anzupassen.",
                },
            },
        },
    ],
    "classroom-vocabulary": [
        {
            "slug": "education-terminology",
            "translations": {
                "en": {
                    "title": "Essential Classroom and Educational Vocabulary",
                    "content": _body("Words Every Student Needs",
                                     "Syllabus, assignment, lecture and semester: the vocabulary of school and university "
                                     "appears in every course you take."),
                    "notes": "Educational systems vary between countries, so some terms may have different meanings depending on the context.",
                },
                "ar": {
                    "title": "مفردات أساسية للفصل الدراسي والتعليم",
                    "content": _body("كلمات يحتاجها كل طالب", "تظهر مفردات المدرسة والجامعة في كل مقرر تدرسه."),
                    "notes": "تختلف الأنظمة التعليمية بين البلدان، لذا قد يكون لبعض المصطلحات معاني مختلفة حسب السياق.",
                },
                "fr": {
                    "title": "Vocabulaire Essentiel pour la Classe et l'Éducation",
                    "content": _body("Les mots dont chaque élève a besoin", "Le vocabulaire de l'école apparaît dans chaque cours."),
                    "notes": "Les systèmes éducatifs varient d'un pays à l'autre, donc certains termes peuvent avoir des significations différentes selon le contexte.",
                },
                "es": {
                    "title": "Vocabulario Esencial para el Aula y la Educación",
                    "content": _body("Palabras que todo estudiante necesita", "El vocabulario escolar aparece en cada curso."),
                    "notes": "Los sistemas educativos varían entre países, por lo que algunos términos pueden tener diferentes significados dependiendo del contexto.",
                },
                "de": {
                    "title": "Wesentliches Vokabular für Klassenzimmer und Bildung",
                    "content": _body("Wörter, die jeder Lernende braucht", "Der Wortschatz der Schule taucht in jedem Kurs auf."),
                    "notes": "Bildungssysteme variieren zwischen Ländern, daher können einige Begriffe je nach Kontext unterschiedliche Bedeutungen haben.",
                },
            },
        },
    ],
    "academic-writing": [
        {
            "slug": "research-paper-structure",
            "translations": {
                "en": {
                    "title": "Structure and Language of Academic Research Papers",
                    "content": _body("From Abstract to Conclusion",
                                     "Research papers share a common shape: abstract, introduction, methods, results "
                                     "and discussion. Each part has its own typical phrases."),
                    "notes": "Academic writing styles vary slightly between disciplines. Consult specific style guides (APA, MLA, Chicago) for detailed formatting requirements.",
                },
                "ar": {
                    "title": "هيكل ولغة الأوراق البحثية الأكاديمية",
                    "content": _body("من الملخص إلى الخاتمة", "تشترك الأوراق البحثية في شكل واحد."),
                    "notes": "تختلف أساليب الكتابة الأكاديمية قليلاً بين التخصصات. راجع أدلة الأسلوب المحددة لمتطلبات التنسيق.",
                },
                "fr": {
                    "title": "Structure et Langage des Articles de Recherche Académiques",
                    "content": _body("Du résumé à la conclusion", "Les articles de recherche partagent une structure commune."),
                    "notes": "Les styles d'écriture académique varient légèrement entre les disciplines. Consultez des guides de style spécifiques (APA, MLA, Chicago) pour les exigences de formatage détaillées.",
                },
                "es": {
                    "title": "Estructura y Lenguaje de los Trabajos de Investigación Académicos",
                    "content": _body("Del resumen a la conclusión", "Los trabajos de investigación comparten una estructura común."),
                    "notes": "Los estilos de escritura académica varían ligeramente entre disciplinas. Consulta guías de estilo específicas (APA, MLA, Chicago) para requisitos de formato detallados.",
                },
                "de": {
                    "title": "Struktur und Sprache akademischer Forschungsarbeiten",
                    "content": _body("Vom Abstract bis zum Fazit", "Forschungsarbeiten haben eine gemeinsame Struktur."),
                    "notes": "Akademische Schreibstile variieren leicht zwischen verschiedenen Disziplinen. Konsultieren Sie spezifische Stilrichtlinien (APA, MLA, Chicago) für detaillierte Formatierungsanforderungen.",
                },
            },
        },
    ],
}
