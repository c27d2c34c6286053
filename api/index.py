from contextlib import asynccontextmanager
from functools import lru_cache
import logging
from pathlib import Path
import sys

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

# Ensure local src package is importable in serverless runtime.
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from blend_studio import FlowController, GenerationClient  # noqa: E402
from blend_studio.catalog import FLAVOR_CATALOG, is_known_flavor  # noqa: E402
from blend_studio.config import Settings  # noqa: E402
from blend_studio.radar import radar_geometry, radar_labels  # noqa: E402
from blend_studio.schema import ChatMessage, CoffeeResult, HistoryEntry  # noqa: E402
from blend_studio.translations import get_text  # noqa: E402

logger = logging.getLogger(__name__)
SETTINGS = Settings.from_env()


@lru_cache(maxsize=1)
def get_controller() -> FlowController:
    return FlowController(GenerationClient(settings=SETTINGS))


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Fail at boot when GEMINI_API_KEY is missing.
    get_controller()
    yield


app = FastAPI(title="blend-studio API", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(SETTINGS.frontend_origins),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


class Coordinate(BaseModel):
    x: float = Field(ge=-1.0, le=1.0)
    y: float = Field(ge=-1.0, le=1.0)


class CupState(BaseModel):
    fill: float
    liquidColor: str


class SessionResponse(BaseModel):
    screen: str
    language: str
    selectedFlavors: list[str]
    coordinate: Coordinate
    loading: bool
    canContinue: bool
    continueLabel: str
    cup: CupState
    result: CoffeeResult | None = None


class ActionResponse(BaseModel):
    accepted: bool
    session: SessionResponse


class LanguageRequest(BaseModel):
    language: str


class FlavorOption(BaseModel):
    id: str
    label: str
    color: str
    icon: str
    selected: bool
    disabled: bool


class CatalogResponse(BaseModel):
    language: str
    remaining: int
    flavors: list[FlavorOption]


class PassportResponse(BaseModel):
    title: str
    entries: list[HistoryEntry]
    emptySlots: int
    insight: str | None = None


class RadarPoint(BaseModel):
    x: float
    y: float


class RadarResponse(BaseModel):
    labels: list[str]
    points: list[RadarPoint]
    webs: list[list[RadarPoint]]
    spokes: list[RadarPoint]
    labelAnchors: list[RadarPoint]


class ChatRequest(BaseModel):
    text: str


class ChatResponse(BaseModel):
    isOpen: bool
    isTyping: bool
    messages: list[ChatMessage]


def _session_view(controller: FlowController) -> SessionResponse:
    session = controller.session
    cup = controller.cup_state()
    x, y = session.coordinate
    return SessionResponse(
        screen=session.screen.value,
        language=session.language,
        selectedFlavors=list(session.selected_flavors),
        coordinate=Coordinate(x=x, y=y),
        loading=session.loading,
        canContinue=controller.can_continue(),
        continueLabel=controller.continue_label(),
        cup=CupState(fill=cup["fill"], liquidColor=cup["liquid_color"]),
        result=session.result,
    )


def _action(controller: FlowController, accepted: bool) -> ActionResponse:
    return ActionResponse(accepted=accepted, session=_session_view(controller))


def _chat_view(controller: FlowController) -> ChatResponse:
    chat = controller.chat
    return ChatResponse(isOpen=chat.is_open, isTyping=chat.is_typing, messages=list(chat.messages))


def _points(points) -> list[RadarPoint]:
    return [RadarPoint(x=p.x, y=p.y) for p in points]


@app.get("/health")
def health() -> dict[str, bool]:
    return {"ok": True}


@app.get("/session", response_model=SessionResponse)
def read_session(controller: FlowController = Depends(get_controller)) -> SessionResponse:
    return _session_view(controller)


@app.post("/session/start", response_model=ActionResponse)
def start(controller: FlowController = Depends(get_controller)) -> ActionResponse:
    return _action(controller, controller.start())


@app.post("/session/back", response_model=ActionResponse)
def back(controller: FlowController = Depends(get_controller)) -> ActionResponse:
    return _action(controller, controller.back())


@app.post("/session/flavors/{flavor_id}", response_model=ActionResponse)
def select_flavor(flavor_id: str, controller: FlowController = Depends(get_controller)) -> ActionResponse:
    if not is_known_flavor(flavor_id):
        raise HTTPException(status_code=404, detail=f"unknown flavor: {flavor_id}")
    return _action(controller, controller.add_flavor(flavor_id))


@app.delete("/session/flavors/{flavor_id}", response_model=ActionResponse)
def deselect_flavor(flavor_id: str, controller: FlowController = Depends(get_controller)) -> ActionResponse:
    if not is_known_flavor(flavor_id):
        raise HTTPException(status_code=404, detail=f"unknown flavor: {flavor_id}")
    return _action(controller, controller.remove_flavor(flavor_id))


@app.post("/session/continue", response_model=ActionResponse)
def continue_to_balance(controller: FlowController = Depends(get_controller)) -> ActionResponse:
    return _action(controller, controller.continue_to_balance())


@app.put("/session/balance", response_model=ActionResponse)
def set_balance(body: Coordinate, controller: FlowController = Depends(get_controller)) -> ActionResponse:
    return _action(controller, controller.set_coordinate(body.x, body.y))


@app.post("/session/reveal", response_model=ActionResponse)
async def reveal(controller: FlowController = Depends(get_controller)) -> ActionResponse:
    result = await controller.reveal()
    return _action(controller, result is not None)


@app.post("/session/restart", response_model=ActionResponse)
def restart(controller: FlowController = Depends(get_controller)) -> ActionResponse:
    return _action(controller, controller.restart())


@app.post("/session/passport", response_model=ActionResponse)
def open_passport(controller: FlowController = Depends(get_controller)) -> ActionResponse:
    return _action(controller, controller.open_passport())


@app.delete("/session/passport", response_model=ActionResponse)
def close_passport(controller: FlowController = Depends(get_controller)) -> ActionResponse:
    return _action(controller, controller.close_passport())


@app.put("/session/language", response_model=ActionResponse)
def set_language(body: LanguageRequest, controller: FlowController = Depends(get_controller)) -> ActionResponse:
    return _action(controller, controller.set_language(body.language))


@app.get("/passport", response_model=PassportResponse)
def passport(controller: FlowController = Depends(get_controller)) -> PassportResponse:
    language = controller.session.language
    return PassportResponse(
        title=get_text(language)["passport_title"],
        entries=list(controller.history.entries),
        emptySlots=controller.history.empty_slots(),
        insight=controller.history.insight(language),
    )


@app.get("/catalog", response_model=CatalogResponse)
def catalog(controller: FlowController = Depends(get_controller)) -> CatalogResponse:
    text = controller.text
    selected = controller.selected_flavors
    full = controller.flavors_remaining() == 0
    return CatalogResponse(
        language=controller.session.language,
        remaining=controller.flavors_remaining(),
        flavors=[
            FlavorOption(
                id=flavor.id,
                label=text["flavors"][flavor.id],
                color=flavor.color,
                icon=flavor.icon,
                selected=flavor.id in selected,
                disabled=flavor.id not in selected and full,
            )
            for flavor in FLAVOR_CATALOG
        ],
    )


@app.get("/radar", response_model=RadarResponse)
def radar(controller: FlowController = Depends(get_controller)) -> RadarResponse:
    result = controller.session.result
    if result is None:
        raise HTTPException(status_code=404, detail="no result yet")
    geometry = radar_geometry(result.radar_data)
    return RadarResponse(
        labels=list(radar_labels(controller.session.language)),
        points=_points(geometry.points),
        webs=[_points(ring) for ring in geometry.webs],
        spokes=_points(geometry.spokes),
        labelAnchors=_points(geometry.label_anchors),
    )


@app.post("/chat/open", response_model=ChatResponse)
def open_chat(controller: FlowController = Depends(get_controller)) -> ChatResponse:
    controller.chat.open()
    return _chat_view(controller)


@app.post("/chat/close", response_model=ChatResponse)
def close_chat(controller: FlowController = Depends(get_controller)) -> ChatResponse:
    controller.chat.close()
    return _chat_view(controller)


@app.post("/chat/messages", response_model=ChatResponse)
async def send_chat(body: ChatRequest, controller: FlowController = Depends(get_controller)) -> ChatResponse:
    if not controller.chat.is_open:
        raise HTTPException(status_code=409, detail="chat is closed")
    await controller.chat.send(body.text)
    return _chat_view(controller)
