# =============================================================================
# core/nepal_data.py  —  Bundled static datasets (the always-available fallback)
# =============================================================================
#
# When the remote store is unreachable, empty, or switched off, the
# resolution layer serves these tables instead.  They have exactly the same
# shape as the reshaped remote records, so nothing downstream can tell which
# source it got.
#
# They double as the seed data for a fresh store (see core/seeding.py).
# =============================================================================

from core.models import (
    Coordinates,
    Destination,
    District,
    ImpactMetric,
    MonthlyVisitorPoint,
    Province,
)


# -----------------------------------------------------------------------------
# Provinces and their districts (2021 census populations)
# -----------------------------------------------------------------------------
PROVINCES: tuple[Province, ...] = (
    Province("koshi", "Koshi", "Biratnagar", 25905, 4961412, districts=(
        District("taplejung", "Taplejung", "Fungling", 3646, 120590),
        District("terhathum", "Terhathum", "Myanglung", 679, 88731),
        District("panchthar", "Panchthar", "Phidim", 1241, 172400),
        District("sankhuwasabha", "Sankhuwasabha", "Khandbari", 3480, 158041),
        District("solukhumbu", "Solukhumbu", "Salleri", 3312, 104851),
        District("bhojpur", "Bhojpur", "Bhojpur", 1507, 157923),
        District("khotang", "Khotang", "Diktel", 1591, 175298),
        District("ilam", "Ilam", "Ilam", 1703, 279534),
        District("udayapur", "Udayapur", "Gaighat", 2063, 340721),
        District("okhaldhunga", "Okhaldhunga", "Siddhicharan", 1074, 139552),
        District("jhapa", "Jhapa", "Bhadrapur", 1606, 998054),
        District("dhankuta", "Dhankuta", "Dhankuta", 892, 150599),
        District("morang", "Morang", "Biratnagar", 1855, 1148156),
        District("sunsari", "Sunsari", "Inaruwa", 1257, 926962),
    )),
    Province("madhesh", "Madhesh", "Janakpur", 9661, 6114600, districts=(
        District("parsa", "Parsa", "Birjung", 1353, 654471),
        District("bara", "Bara", "Kalaiya", 1190, 763137),
        District("rautahat", "Rautahat", "Gaur", 1126, 813573),
        District("sarlahi", "Sarlahi", "Malangwa", 1259, 862470),
        District("mahottari", "Mahottari", "Jaleshwar", 1002, 706994),
        District("dhanusha", "Dhanusha", "Janakpur", 1180, 867747),
        District("siraha", "Siraha", "Siraha", 1188, 739953),
        District("saptari", "Saptari", "Rajbiraj", 1363, 706255),
    )),
    Province("bagmati", "Bagmati", "Hetauda", 20300, 6116866, districts=(
        District("sindhuli", "Sindhuli", "Kamalamai", 2491, 300026),
        District("ramechhap", "Ramechhap", "Manthali", 1546, 170302),
        District("dolakha", "Dolakha", "Bhimeshwar", 2191, 172767),
        District("bhaktapur", "Bhaktapur", "Bhaktapur", 119, 432132),
        District("dhading", "Dhading", "Nilkantha", 1926, 325710),
        District("kathmandu", "Kathmandu", "Kathmandu", 395, 2041587),
        District("kavrepalanchok", "Kavrepalanchok", "Dhulikhel", 1396, 364039),
        District("lalitpur", "Lalitpur", "Lalitpur", 385, 551667),
        District("nuwakot", "Nuwakot", "Bidur", 1121, 263391),
        District("rasuwa", "Rasuwa", "Dhunche", 1544, 46689),
        District("sindhupalchok", "Sindhupalchok", "Chautara", 2542, 262624),
        District("chitwan", "Chitwan", "Bharatpur", 2218, 719859),
        District("makwanpur", "Makwanpur", "Hetauda", 2426, 466073),
    )),
    Province("gandaki", "Gandaki", "Pokhara", 21504, 2466427, districts=(
        District("baglung", "Baglung", "Baglung", 1784, 249211),
        District("gorkha", "Gorkha", "Gorkha Bazar", 3610, 251027),
        District("kaski", "Kaski", "Pokhara", 2017, 600051),
        District("lamjung", "Lamjung", "Besisahar", 1692, 155852),
        District("manang", "Manang", "Chame", 2246, 5658),
        District("mustang", "Mustang", "Jomsom", 3573, 14452),
        District("myagdi", "Myagdi", "Beni", 2297, 107033),
        District("nawalpur", "Nawalpur", "Kawasoti", 1043, 378079),
        District("parbat", "Parbat", "Kusma", 494, 130887),
        District("syangja", "Syangja", "Putalibazar", 1164, 253024),
        District("tanahun", "Tanahun", "Damauli", 1546, 321153),
    )),
    Province("lumbini", "Lumbini", "Deukhuri", 22288, 5122078, districts=(
        District("kapilvastu", "Kapilvastu", "Taulihawa", 1738, 682961),
        District("parasi", "Parasi", "Ramgram", 634, 386868),
        District("rupandehi", "Rupandehi", "Siddharthanagar", 1360, 1121957),
        District("arghakhanchi", "Arghakhanchi", "Sandhikharka", 1193, 177086),
        District("gulmi", "Gulmi", "Tamghas", 1149, 246494),
        District("palpa", "Palpa", "Tansen", 1373, 245027),
        District("dang", "Dang", "Ghorahi", 2955, 674993),
        District("pyuthan", "Pyuthan", "Pyuthan", 1309, 232019),
        District("rolpa", "Rolpa", "Liwang", 1879, 234793),
        District("rukum-east", "Rukum East", "Rukumkot", 1161, 56786),
        District("banke", "Banke", "Nepalgunj", 2337, 603194),
        District("bardiya", "Bardiya", "Gulariya", 2025, 459900),
    )),
    Province("karnali", "Karnali", "Birendranagar", 27984, 1688412, districts=(
        District("rukum-west", "Rukum West", "Musikot", 1213, 166740),
        District("salyan", "Salyan", "Salyan", 1462, 238515),
        District("dolpa", "Dolpa", "Dunai", 7889, 42774),
        District("humla", "Humla", "Simikot", 5655, 55394),
        District("jumla", "Jumla", "Chandannath", 2531, 118349),
        District("kalikot", "Kalikot", "Manma", 1741, 145292),
        District("mugu", "Mugu", "Gamgadhi", 3535, 64549),
        District("surkhet", "Surkhet", "Birendranagar", 2451, 415126),
        District("dailekh", "Dailekh", "Narayan", 1502, 252313),
        District("jajarkot", "Jajarkot", "Khalanga", 2230, 189360),
    )),
    Province("sudurpashchim", "Sudurpashchim", "Dhangadhi", 19915, 2694783, districts=(
        District("kailali", "Kailali", "Dhangadhi", 3235, 904666),
        District("achham", "Achham", "Mangalsen", 1680, 228852),
        District("doti", "Doti", "Dipayal", 2025, 204831),
        District("bajhang", "Bajhang", "Chainpur", 3422, 189085),
        District("bajura", "Bajura", "Martadi", 2188, 138523),
        District("kanchanpur", "Kanchanpur", "Bhimdatta", 1610, 513757),
        District("dadeldhura", "Dadeldhura", "Amargadhi", 1538, 139602),
        District("baitadi", "Baitadi", "Dasharathchand", 1519, 242157),
        District("darchula", "Darchula", "Darchula", 2322, 133310),
    )),
)


# -----------------------------------------------------------------------------
# Top destinations
# -----------------------------------------------------------------------------
# Image paths are site-relative assets; community additions carry public
# bucket URLs instead.
# -----------------------------------------------------------------------------
DESTINATIONS: tuple[Destination, ...] = (
    Destination(
        id="everest-base-camp",
        name="Everest Base Camp",
        province_id="koshi",
        district_id="solukhumbu",
        category="Trekking Routes",
        elevation="5,364 m",
        best_months=("March", "April", "May", "October", "November"),
        description="The ultimate trekking destination offering breathtaking views of the world's highest peak.",
        cultural_significance="Sacred mountain in Sherpa culture, home to the highest monastery in the world.",
        image="/everest-summit.jpg",
        coordinates=Coordinates(28.0024, 86.8525),
        weather_condition="Clear",
        temperature=-12,
    ),
    Destination(
        id="annapurna-circuit",
        name="Annapurna Circuit",
        province_id="gandaki",
        district_id="manang",
        category="Trekking Routes",
        elevation="5,416 m",
        best_months=("March", "April", "October", "November"),
        description="One of the most diverse treks, circling the Annapurna massif through varied landscapes.",
        cultural_significance="Ancient trade route connecting Nepal with Tibet, rich in Buddhist heritage.",
        image="/annapurna-trekker.jpg",
        coordinates=Coordinates(28.7963, 83.9440),
        weather_condition="Partly Cloudy",
        temperature=5,
    ),
    Destination(
        id="kathmandu-valley",
        name="Kathmandu Valley",
        province_id="bagmati",
        district_id="kathmandu",
        category="Heritage Sites",
        elevation="1,400 m",
        best_months=("September", "October", "November", "March", "April", "May"),
        description="A living museum of temples, stupas, and carved wooden streets with 7 UNESCO sites.",
        cultural_significance="Center of Newari civilization and spiritual hub for Hinduism and Buddhism.",
        image="/kathmandu-stupa.jpg",
        coordinates=Coordinates(27.7172, 85.3240),
        weather_condition="Sunny",
        temperature=22,
    ),
    Destination(
        id="pokhara",
        name="Pokhara",
        province_id="gandaki",
        district_id="kaski",
        category="Adventure Sports",
        elevation="822 m",
        best_months=("September", "October", "November", "March", "April", "May"),
        description="Adventure capital of Nepal with paragliding, boating, and stunning mountain views.",
        cultural_significance="Gateway to Annapurna, sacred lakeside city with rich Gurung culture.",
        image="/pokhara-lake.jpg",
        coordinates=Coordinates(28.2096, 83.9856),
        weather_condition="Clear",
        temperature=25,
    ),
    Destination(
        id="chitwan-national-park",
        name="Chitwan National Park",
        province_id="bagmati",
        district_id="chitwan",
        category="Wildlife",
        elevation="415 m",
        best_months=("October", "November", "December", "January", "February", "March"),
        description="UNESCO World Heritage site home to Bengal tigers, one-horned rhinos, and elephants.",
        cultural_significance="Traditional Tharu homeland with unique indigenous culture.",
        image="/chitwan-elephant.jpg",
        coordinates=Coordinates(27.5291, 84.3542),
        weather_condition="Sunny",
        temperature=28,
    ),
    Destination(
        id="lumbini",
        name="Lumbini",
        province_id="lumbini",
        district_id="rupandehi",
        category="Spiritual Centers",
        elevation="150 m",
        best_months=("October", "November", "December", "January", "February", "March"),
        description="Birthplace of Lord Buddha, a UNESCO World Heritage spiritual sanctuary.",
        cultural_significance="Most sacred Buddhist pilgrimage site, birthplace of Siddhartha Gautama.",
        image="/lumbini-garden.jpg",
        coordinates=Coordinates(27.4500, 83.2500),
        weather_condition="Clear",
        temperature=30,
    ),
    Destination(
        id="langtang-valley",
        name="Langtang Valley",
        province_id="bagmati",
        district_id="rasuwa",
        category="Trekking Routes",
        elevation="3,870 m",
        best_months=("March", "April", "May", "October", "November"),
        description="Accessible trekking destination with glaciers, yak pastures, and Tamang villages.",
        cultural_significance="Tamang heartland with Tibetan Buddhist monasteries and traditions.",
        image="/langtang-valley.jpg",
        coordinates=Coordinates(28.2343, 85.5674),
        weather_condition="Partly Cloudy",
        temperature=8,
    ),
    Destination(
        id="bhaktapur",
        name="Bhaktapur Durbar Square",
        province_id="bagmati",
        district_id="bhaktapur",
        category="Heritage Sites",
        elevation="1,401 m",
        best_months=("September", "October", "November", "March", "April", "May"),
        description="Best preserved medieval city with pottery squares and Newari architecture.",
        cultural_significance="Former capital of Malla kingdom, center of Newari arts and crafts.",
        image="/bhaktapur-temple.jpg",
        coordinates=Coordinates(27.6722, 85.4278),
        weather_condition="Sunny",
        temperature=23,
    ),
    Destination(
        id="upper-mustang",
        name="Upper Mustang",
        province_id="gandaki",
        district_id="mustang",
        category="Cultural Villages",
        elevation="3,840 m",
        best_months=("May", "June", "July", "August", "September", "October"),
        description="Forbidden Kingdom with wind-carved canyons, cliff caves, and Tibetan culture.",
        cultural_significance="Last bastion of traditional Tibetan culture, ancient Lo Kingdom.",
        image="/mustang-canyon.jpg",
        coordinates=Coordinates(29.1833, 83.9500),
        weather_condition="Clear",
        temperature=15,
    ),
    Destination(
        id="muktinath",
        name="Muktinath Temple",
        province_id="gandaki",
        district_id="mustang",
        category="Spiritual Centers",
        elevation="3,800 m",
        best_months=("March", "April", "May", "September", "October", "November"),
        description="Sacred pilgrimage site where flames burn beside icy springs.",
        cultural_significance="Important site for both Hindus and Buddhists, place of salvation.",
        image="/mustang-canyon.jpg",
        coordinates=Coordinates(28.8167, 83.8708),
        weather_condition="Clear",
        temperature=10,
    ),
    Destination(
        id="janakpur",
        name="Janakpur",
        province_id="madhesh",
        district_id="dhanusha",
        category="Heritage Sites",
        elevation="74 m",
        best_months=("October", "November", "December", "January", "February", "March"),
        description="Ancient city believed to be the birthplace of Goddess Sita.",
        cultural_significance="Important Hindu pilgrimage site, center of Maithili culture.",
        image="/lumbini-garden.jpg",
        coordinates=Coordinates(26.7271, 85.9407),
        weather_condition="Sunny",
        temperature=32,
    ),
    Destination(
        id="bardiya-national-park",
        name="Bardiya National Park",
        province_id="lumbini",
        district_id="bardiya",
        category="Wildlife",
        elevation="152 m",
        best_months=("October", "November", "December", "January", "February", "March"),
        description="Largest national park in Terai, home to wild elephants and Bengal tigers.",
        cultural_significance="Traditional Tharu homeland with rich indigenous culture.",
        image="/chitwan-elephant.jpg",
        coordinates=Coordinates(28.3833, 81.4167),
        weather_condition="Sunny",
        temperature=29,
    ),
    Destination(
        id="gorkha-palace",
        name="Gorkha Palace",
        province_id="gandaki",
        district_id="gorkha",
        category="Heritage Sites",
        elevation="1,131 m",
        best_months=("September", "October", "November", "March", "April", "May"),
        description="Birthplace of King Prithvi Narayan Shah who unified Nepal.",
        cultural_significance="Birthplace of modern Nepal, important historical monument.",
        image="/kathmandu-stupa.jpg",
        coordinates=Coordinates(28.0000, 84.6333),
        weather_condition="Sunny",
        temperature=24,
    ),
    Destination(
        id="rara-lake",
        name="Rara Lake",
        province_id="karnali",
        district_id="mugu",
        category="Wildlife",
        elevation="2,990 m",
        best_months=("April", "May", "September", "October"),
        description="Nepal's largest lake surrounded by Rara National Park.",
        cultural_significance="Sacred lake in local folklore, pristine alpine ecosystem.",
        image="/pokhara-lake.jpg",
        coordinates=Coordinates(29.5500, 82.0833),
        weather_condition="Clear",
        temperature=12,
    ),
    Destination(
        id="tansen",
        name="Tansen",
        province_id="lumbini",
        district_id="palpa",
        category="Cultural Villages",
        elevation="1,350 m",
        best_months=("September", "October", "November", "March", "April", "May"),
        description="Historic hill station with traditional Newari architecture.",
        cultural_significance="Former Magar kingdom, center of traditional Dhaka weaving.",
        image="/bhaktapur-temple.jpg",
        coordinates=Coordinates(27.8667, 83.5500),
        weather_condition="Sunny",
        temperature=22,
    ),
    Destination(
        id="bandipur",
        name="Bandipur",
        province_id="gandaki",
        district_id="tanahun",
        category="Cultural Villages",
        elevation="1,030 m",
        best_months=("September", "October", "November", "March", "April", "May"),
        description="Preserved hilltop town with 18th-century Newari architecture.",
        cultural_significance="Former trading hub on Tibet trade route, living museum.",
        image="/langtang-valley.jpg",
        coordinates=Coordinates(27.9333, 84.4167),
        weather_condition="Sunny",
        temperature=23,
    ),
)


# -----------------------------------------------------------------------------
# Impact dashboard
# -----------------------------------------------------------------------------
IMPACT_METRICS: tuple[ImpactMetric, ...] = (
    ImpactMetric("carbon-offset", "Tourist Footprint Offset", 12540, "tons CO₂", 12.5, "vs last year"),
    ImpactMetric("community-revenue", "Local Community Revenue", 8.2, "M NPR", 23.8, "vs last year"),
    ImpactMetric("heritage-investment", "Heritage Preservation", 3.5, "M NPR", 18.2, "vs last year"),
    ImpactMetric("wildlife-protection", "Wildlife Protection", 156, "sq km", 8.4, "new areas"),
)

MONTHLY_VISITOR_DATA: tuple[MonthlyVisitorPoint, ...] = (
    MonthlyVisitorPoint("Jan", 45000, 890),
    MonthlyVisitorPoint("Feb", 52000, 1020),
    MonthlyVisitorPoint("Mar", 78000, 1540),
    MonthlyVisitorPoint("Apr", 95000, 1870),
    MonthlyVisitorPoint("May", 88000, 1730),
    MonthlyVisitorPoint("Jun", 62000, 1220),
    MonthlyVisitorPoint("Jul", 48000, 950),
    MonthlyVisitorPoint("Aug", 55000, 1080),
    MonthlyVisitorPoint("Sep", 82000, 1610),
    MonthlyVisitorPoint("Oct", 110000, 2160),
    MonthlyVisitorPoint("Nov", 98000, 1930),
    MonthlyVisitorPoint("Dec", 58000, 1140),
)
