# =============================================================================
# core/trek_data.py  —  Static trek table
# =============================================================================
#
# The candidate list the matcher falls back to when the destinations table
# is empty or the query errors.  Its first three entries are also the
# fixed "never render nothing" default when candidate sourcing fails
# outright, so keep the most broadly appealing treks at the top.
# =============================================================================

from core.models import Trek


FALLBACK_TREKS: tuple[Trek, ...] = (
    Trek(
        id="everest-base-camp",
        name="Everest Base Camp",
        description="Walk through Sherpa villages and monasteries to the foot of the world's highest mountain.",
        image_url="/everest-summit.jpg",
        min_days=12,
        max_days=16,
        priority_type=("Mountains", "Mix"),
        budget_level="Mid-range",
        fitness_required="Experienced",
        ideal_for=("solo", "group"),
        highlights=("Kala Patthar sunrise", "Tengboche Monastery", "Namche Bazaar"),
        best_season="March-May, September-November",
        estimated_cost_usd=1400,
        permit_required=True,
    ),
    Trek(
        id="annapurna-base-camp",
        name="Annapurna Base Camp",
        description="A glacier-ringed amphitheatre reached through rhododendron forest and Gurung villages.",
        image_url="/annapurna-trekker.jpg",
        min_days=7,
        max_days=12,
        priority_type=("Mountains", "Culture", "Mix"),
        budget_level="Mid-range",
        fitness_required="Moderate",
        ideal_for=("solo", "group"),
        highlights=("Machapuchare Base Camp", "Jhinu hot springs", "Ghandruk village"),
        best_season="March-May",
        estimated_cost_usd=900,
        permit_required=True,
    ),
    Trek(
        id="poon-hill",
        name="Ghorepani Poon Hill",
        description="A short teahouse trek with one of the best Himalayan sunrise viewpoints in Nepal.",
        image_url="/pokhara-lake.jpg",
        min_days=3,
        max_days=5,
        priority_type=("Mountains", "Culture", "Mix"),
        budget_level="Budget",
        fitness_required="Beginner",
        ideal_for=("solo", "group"),
        highlights=("Poon Hill sunrise", "Dhaulagiri views", "Magar villages"),
        best_season="October-November",
        estimated_cost_usd=350,
        permit_required=True,
    ),
    Trek(
        id="langtang-valley",
        name="Langtang Valley",
        description="Yak pastures, glaciers and Tamang villages within a day's drive of Kathmandu.",
        image_url="/langtang-valley.jpg",
        min_days=7,
        max_days=10,
        priority_type=("Mountains", "Culture"),
        budget_level="Budget",
        fitness_required="Moderate",
        ideal_for=("solo", "group"),
        highlights=("Kyanjin Gompa", "Tserko Ri", "Cheese factory"),
        best_season="March-May",
        estimated_cost_usd=600,
        permit_required=True,
    ),
    Trek(
        id="annapurna-circuit",
        name="Annapurna Circuit",
        description="The classic full circuit over the Thorong La pass, from subtropical valleys to high desert.",
        image_url="/annapurna-trekker.jpg",
        min_days=14,
        max_days=21,
        priority_type=("Mountains", "Culture", "Mix"),
        budget_level="Mid-range",
        fitness_required="Experienced",
        ideal_for=("group",),
        highlights=("Thorong La pass", "Manang", "Muktinath Temple"),
        best_season="October-November",
        estimated_cost_usd=1200,
        permit_required=True,
    ),
    Trek(
        id="upper-mustang",
        name="Upper Mustang",
        description="The former Kingdom of Lo: walled Lo Manthang, cliff caves and wind-carved canyons.",
        image_url="/mustang-canyon.jpg",
        min_days=10,
        max_days=14,
        priority_type=("Culture",),
        budget_level="Luxury",
        fitness_required="Moderate",
        ideal_for=("group",),
        highlights=("Lo Manthang", "Chhoser caves", "Tiji festival"),
        best_season="May-October",
        estimated_cost_usd=2500,
        permit_required=True,
    ),
    Trek(
        id="manaslu-circuit",
        name="Manaslu Circuit",
        description="A remote restricted-area circuit around the world's eighth highest peak.",
        image_url="/langtang-valley.jpg",
        min_days=14,
        max_days=18,
        priority_type=("Mountains", "Culture"),
        budget_level="Luxury",
        fitness_required="Experienced",
        ideal_for=("group",),
        highlights=("Larkya La pass", "Samagaun", "Birendra Lake"),
        best_season="September-November",
        estimated_cost_usd=2000,
        permit_required=True,
    ),
    Trek(
        id="chitwan-jungle-walk",
        name="Chitwan Jungle Walk",
        description="Guided jungle walks and canoe trips in search of rhinos, gharials and tigers.",
        image_url="/chitwan-elephant.jpg",
        min_days=3,
        max_days=5,
        priority_type=("Wildlife", "Mix"),
        budget_level="Mid-range",
        fitness_required="Beginner",
        ideal_for=("solo", "group"),
        highlights=("Rapti river canoeing", "Tharu village visit", "Bird watching"),
        best_season="October-March",
        estimated_cost_usd=400,
        permit_required=False,
    ),
    Trek(
        id="bardiya-wilderness",
        name="Bardiya Wilderness Trail",
        description="Quiet forest trails in the far west with the best odds of a wild tiger sighting in Nepal.",
        image_url="/chitwan-elephant.jpg",
        min_days=4,
        max_days=7,
        priority_type=("Wildlife",),
        budget_level="Budget",
        fitness_required="Beginner",
        ideal_for=("solo", "group"),
        highlights=("Karnali river", "Tiger tracking", "Tharu homestay"),
        best_season="October-March",
        estimated_cost_usd=450,
        permit_required=False,
    ),
    Trek(
        id="kathmandu-valley-rim",
        name="Kathmandu Valley Rim",
        description="Hill villages, stupas and Durbar Squares linked by trails along the valley rim.",
        image_url="/kathmandu-stupa.jpg",
        min_days=3,
        max_days=6,
        priority_type=("Culture", "Mix"),
        budget_level="Budget",
        fitness_required="Beginner",
        ideal_for=("solo", "group"),
        highlights=("Nagarkot sunrise", "Changu Narayan", "Bhaktapur Durbar Square"),
        best_season="September-May",
        estimated_cost_usd=300,
        permit_required=False,
    ),
)
