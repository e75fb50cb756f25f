# =============================================================================
# core/news.py  —  Travel news feed and search
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Serves a small bundled news feed per destination plus a general feed,
#   merged with whatever travellers have shared through the contribution
#   path, and filters it by destination, category and free text.
#
# SEARCH ORDER:
#   1. community articles, then the general feed
#   2. a chosen destination's feed goes in front of both
#   3. exact category filter
#   4. case-insensitive substring match on title or description
#   5. duplicates (same title) dropped, first occurrence kept
# =============================================================================

from core.models import NewsArticle


def _article(title, description, published_at, source, category) -> NewsArticle:
    return NewsArticle(
        title=title,
        description=description,
        url="#",
        published_at=published_at,
        source=source,
        category=category,
    )


# -----------------------------------------------------------------------------
# Bundled feeds, keyed by destination id ("default" is the general feed)
# -----------------------------------------------------------------------------
NEWS_FEEDS: dict[str, tuple[NewsArticle, ...]] = {
    "everest-base-camp": (
        _article("New Route Opened to Everest Base Camp for 2024 Season",
                 "Nepal Tourism Board announces improved trekking infrastructure with new eco-friendly lodges along the popular route.",
                 "2024-01-15", "Nepal Tourism News", "Trekking"),
        _article("Record Number of Climbers Summit Everest This Spring",
                 "Over 500 climbers from 45 countries successfully reached the world's highest peak this season.",
                 "2024-01-12", "Himalayan Times", "Adventure"),
        _article("Everest Region Implements New Waste Management System",
                 "Sagarmatha National Park introduces mandatory waste carry-back policy for all expeditions.",
                 "2024-01-08", "Eco Nepal", "Environment"),
    ),
    "annapurna-circuit": (
        _article("Annapurna Circuit Named World's Best Trek by Travel Magazine",
                 "The iconic trek receives international recognition for its diverse landscapes and cultural experiences.",
                 "2024-01-14", "Travel Weekly", "Awards"),
        _article("New Tea Houses Open on Annapurna Trail",
                 "Local entrepreneurs invest in sustainable accommodation options for trekkers.",
                 "2024-01-10", "Nepal Business Review", "Business"),
        _article("Annapurna Conservation Area Reports Increased Wildlife Sightings",
                 "Snow leopard and red panda populations show positive growth trends.",
                 "2024-01-05", "Wildlife Nepal", "Wildlife"),
    ),
    "kathmandu-valley": (
        _article("Kathmandu Valley Heritage Sites Receive UNESCO Funding",
                 "Major restoration projects announced for earthquake-damaged monuments in the valley.",
                 "2024-01-16", "Heritage Today", "Heritage"),
        _article("New Direct Flights Connect Kathmandu to European Cities",
                 "Nepal Airlines expands international routes with direct connections to Frankfurt and Paris.",
                 "2024-01-11", "Aviation Nepal", "Transport"),
        _article("Kathmandu's Thamel District Transforms into Pedestrian Zone",
                 "Major urban renewal project creates vehicle-free zone in tourist hub.",
                 "2024-01-07", "City News", "Urban"),
    ),
    "pokhara": (
        _article("Pokhara International Airport Completes Expansion",
                 "New terminal increases capacity to handle 2 million passengers annually.",
                 "2024-01-13", "Infrastructure Nepal", "Development"),
        _article("Paragliding World Cup Returns to Pokhara",
                 "International competition draws pilots from 30 countries to the adventure capital.",
                 "2024-01-09", "Sports Nepal", "Sports"),
        _article("Phewa Lake Cleanup Drive Removes 50 Tons of Waste",
                 "Community-led initiative restores water quality in iconic lake.",
                 "2024-01-04", "Environment Nepal", "Environment"),
    ),
    "chitwan-national-park": (
        _article("Chitwan National Park Celebrates 50 Years of Conservation",
                 "Golden jubilee events highlight success in protecting endangered species.",
                 "2024-01-15", "Conservation Nepal", "Conservation"),
        _article("Tiger Population in Chitwan Reaches 128",
                 "Latest census shows 15% increase in Bengal tiger numbers.",
                 "2024-01-11", "Wildlife Today", "Wildlife"),
        _article("New Elephant Breeding Center Opens in Chitwan",
                 "Facility aims to support conservation of Asian elephants in Nepal.",
                 "2024-01-06", "Animal Welfare Nepal", "Wildlife"),
    ),
    "lumbini": (
        _article("Lumbini Master Plan 2040 Unveiled",
                 "Ambitious development plan aims to make Lumbini a global spiritual destination.",
                 "2024-01-14", "Buddhist News", "Development"),
        _article("International Buddhist Conference to be Held in Lumbini",
                 "Over 5,000 delegates expected at the week-long spiritual gathering.",
                 "2024-01-10", "Religion Today", "Events"),
        _article("New Monastery Inaugurated in Lumbini Sacred Garden",
                 "Vietnamese Buddhist community donates $2M for temple construction.",
                 "2024-01-05", "Sacred Sites", "Religion"),
    ),
    "upper-mustang": (
        _article("Upper Mustang Opens for Independent Trekkers",
                 "Nepal government relaxes permit requirements for restricted area.",
                 "2024-01-13", "Trekking Nepal", "Trekking"),
        _article("Ancient Caves in Mustang Reveal New Buddhist Artifacts",
                 "Archaeological survey discovers 1,000-year-old manuscripts.",
                 "2024-01-08", "Archaeology Today", "Heritage"),
        _article("Mustang Apple Festival Attracts Record Visitors",
                 "Annual harvest celebration showcases region's organic produce.",
                 "2024-01-03", "Rural Nepal", "Culture"),
    ),
    "langtang-valley": (
        _article("Langtang Valley Trail Fully Restored After Earthquake",
                 "Reconstruction completes eight years after devastating 2015 earthquake.",
                 "2024-01-12", "Reconstruction Nepal", "Infrastructure"),
        _article("New Research Station Opens in Langtang National Park",
                 "Facility will study climate change impacts on Himalayan glaciers.",
                 "2024-01-07", "Science Nepal", "Research"),
        _article("Langtang Trekking Permits Increase by 40%",
                 "Growing popularity of quieter alternative to Everest and Annapurna routes.",
                 "2024-01-02", "Tourism Stats", "Tourism"),
    ),
    "bhaktapur": (
        _article("Bhaktapur Durbar Square Restoration Wins International Award",
                 "UNESCO recognizes excellence in heritage conservation efforts.",
                 "2024-01-16", "Heritage Awards", "Awards"),
        _article("Pottery Square in Bhaktapur Gets Modern Kiln Facility",
                 "New technology helps preserve traditional Newari pottery craft.",
                 "2024-01-09", "Craft Nepal", "Culture"),
        _article("Bhaktapur Implements Tourist Entry Management System",
                 "Digital ticketing reduces queues at heritage site entrances.",
                 "2024-01-04", "Smart City Nepal", "Technology"),
    ),
    "default": (
        _article("Nepal Tourism Reaches Pre-Pandemic Levels",
                 "Over 1 million international tourists visited Nepal in 2023.",
                 "2024-01-15", "Nepal Tourism Board", "Tourism"),
        _article("Nepal Government Announces New Tourism Strategy",
                 "Focus on sustainable tourism and community-based initiatives.",
                 "2024-01-12", "Government News", "Policy"),
        _article("Himalayan Airlines Adds New International Routes",
                 "Direct flights to Tokyo, Seoul, and Sydney announced for 2024.",
                 "2024-01-10", "Aviation News", "Transport"),
        _article("Nepal's Community Homestay Program Wins Global Recognition",
                 "Initiative empowers rural communities through tourism.",
                 "2024-01-08", "Rural Development", "Community"),
        _article("New Trekking Trails Discovered in Eastern Nepal",
                 "Unexplored routes offer alternative to popular tourist circuits.",
                 "2024-01-05", "Adventure Nepal", "Trekking"),
        _article("Nepal's First Cable Car in Remote District Begins Operation",
                 "New infrastructure improves access to mountain communities.",
                 "2024-01-03", "Infrastructure Nepal", "Development"),
    ),
}


def news_categories(community=()) -> list[str]:
    """Every category that appears in the feeds, sorted."""
    found = {a.category for feed in NEWS_FEEDS.values() for a in feed if a.category}
    found.update(a.category for a in community if a.category)
    return sorted(found)


def search_news(
    destination: str = "all",
    category: str = "all",
    query: str = "",
    community=(),
) -> list[NewsArticle]:
    """Filter the news feed.

    Args:
        destination: A destination id, or "all".  Unknown ids add nothing.
        category: An exact category, or "all".
        query: Free text, matched case-insensitively against title and
            description.  Empty matches everything.
        community: Articles shared by travellers, newest first.

    Returns:
        Matching articles with duplicate titles removed.
    """
    articles = list(community) + list(NEWS_FEEDS["default"])

    if destination != "all":
        articles = list(NEWS_FEEDS.get(destination, ())) + articles

    if category != "all":
        articles = [a for a in articles if a.category == category]

    needle = query.strip().lower()
    if needle:
        articles = [
            a for a in articles
            if needle in a.title.lower() or needle in a.description.lower()
        ]

    seen = set()
    unique = []
    for article in articles:
        if article.title in seen:
            continue
        seen.add(article.title)
        unique.append(article)
    return unique
