import pytest

from fra_assistant.models import Infrastructure, Scheme, Village
from fra_assistant.services.catalog_service import CatalogService
from fra_assistant.services.chat_service import ChatService


def make_scheme(scheme_id, category, name=None, keywords=(), target_audience=()):
    return Scheme(
        id=scheme_id,
        name=name or scheme_id.upper(),
        full_name=f"{scheme_id} full name",
        category=category,
        description=f"{scheme_id} description",
        benefits=["benefit one", "benefit two"],
        eligibility=["eligible residents"],
        target_audience=list(target_audience),
        keywords=list(keywords),
    )


def make_village(
    village_id,
    name,
    forest_dependency=10,
    literacy_rate=90,
    water=90,
    main_occupation=("labour",),
    recommended_schemes=(),
):
    return Village(
        id=village_id,
        name=name,
        state="Madhya Pradesh",
        district="Khandwa",
        population=1200,
        households=250,
        literacy_rate=literacy_rate,
        forest_dependency=forest_dependency,
        main_occupation=list(main_occupation),
        tribal_population=60,
        infrastructure=Infrastructure(electricity=80, water=water, roads=50, school=True, health_center=False),
        challenges=["water scarcity", "migration"],
        recommended_schemes=list(recommended_schemes),
        description=f"{name} test village",
    )


@pytest.fixture
def schemes():
    return [
        make_scheme("pm-kisan", "agriculture", name="PM-KISAN", keywords=["samman nidhi"]),
        make_scheme("pm-fasal-bima", "agriculture", name="PMFBY", keywords=["crop insurance"]),
        make_scheme("kisan-credit-card", "agriculture", name="KCC", keywords=["kcc"]),
        make_scheme("pm-kisan-fpo", "agriculture", name="FPO Scheme", keywords=["fpo"]),
        make_scheme("forest-rights-act", "forest", name="Forest Rights Act", keywords=["patta"],
                    target_audience=["tribal"]),
        make_scheme("van-dhan-yojana", "forest", name="Van Dhan", keywords=["mahua"], target_audience=["tribal"]),
        make_scheme("eklavya-model-schools", "education", name="EMRS", keywords=["emrs"],
                    target_audience=["tribal", "students"]),
        make_scheme("post-matric-scholarship", "education", name="Post Matric", keywords=["scholarship"]),
        make_scheme("jan-dhan-yojana", "finance", name="PMJDY", keywords=["zero balance"]),
        make_scheme("ayushman-bharat", "health", name="Ayushman Bharat", keywords=["arogya"]),
        make_scheme("mgnrega", "employment", name="MGNREGA", keywords=["job card"]),
        make_scheme("jal-jeevan-mission", "water", name="Har Ghar Jal", keywords=["jal", "tap connection"]),
        make_scheme("atal-bhujal", "water", name="Atal Bhujal", keywords=["water", "groundwater"]),
        make_scheme("stand-up-india", "finance", name="Stand-Up India", keywords=["greenfield"]),
        make_scheme("pm-ujjwala", "energy", name="Ujjwala", keywords=["lpg connection"]),
        make_scheme("pension-scheme", "pension", name="IGNOAPS", keywords=["vridha"]),
    ]


@pytest.fixture
def khandwa():
    return make_village(
        "khandwa",
        "Khandwa",
        forest_dependency=72,
        literacy_rate=58,
        water=46,
        main_occupation=["farming", "forest produce"],
        recommended_schemes=["forest-rights-act", "mgnrega", "pm-kisan"],
    )


@pytest.fixture
def tokapal():
    return make_village("bastar-tokapal", "Tokapal", recommended_schemes=["van-dhan-yojana"])


@pytest.fixture
def villages(khandwa, tokapal):
    return [khandwa, tokapal]


@pytest.fixture
def catalog(schemes, villages):
    service = CatalogService()
    service.load_records(
        [scheme.model_dump(by_alias=True) for scheme in schemes],
        [village.model_dump(by_alias=True) for village in villages],
    )
    return service


@pytest.fixture
def chat(catalog):
    return ChatService(catalog=catalog, typing_delay_ms=0)
