"""
XERT API types, enums, and constants.

Typed mirrors of the XERT OAuth API payloads. Optional fields are None
when the server leaves them out.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class WorkoutFormat(Enum):
    """Workout file export formats."""
    ZWO = "zwo"
    ERG = "erg"

    @property
    def content_type(self) -> str:
        return "application/xml" if self is WorkoutFormat.ZWO else "text/plain"

    @classmethod
    def parse(cls, value) -> "WorkoutFormat":
        """Accept a WorkoutFormat or its string value (case-insensitive)."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(
                f"Invalid workout format '{value}'. Must be one of: zwo, erg"
            )


# Workout of the day type when XERT has no recommendation
WOTD_NONE = "None"


@dataclass
class FitnessSignature:
    """Fitness signature: threshold power, lower threshold, HIE (kJ), peak power."""
    ftp: float
    ltp: float
    hie: float
    pp: float
    atc: Optional[float] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "FitnessSignature":
        return cls(
            ftp=d.get("ftp") or 0,
            ltp=d.get("ltp") or 0,
            hie=d.get("hie") or 0,
            pp=d.get("pp") or 0,
            atc=d.get("atc"),
        )


@dataclass
class TrainingLoad:
    """Low/high/peak strain and total (XSS)."""
    low: float
    high: float
    peak: float
    total: float

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "TrainingLoad":
        return cls(
            low=d.get("low") or 0,
            high=d.get("high") or 0,
            peak=d.get("peak") or 0,
            total=d.get("total") or 0,
        )


@dataclass
class WorkoutOfTheDay:
    type: str
    name: Optional[str] = None
    workout_id: Optional[str] = None
    description: Optional[str] = None
    difficulty: Optional[float] = None
    url: Optional[str] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "WorkoutOfTheDay":
        return cls(
            type=d.get("type", WOTD_NONE),
            name=d.get("name"),
            workout_id=d.get("workoutId"),
            description=d.get("description"),
            difficulty=d.get("difficulty"),
            url=d.get("url"),
        )

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["workoutId"] = d.pop("workout_id")
        return d


@dataclass
class TrainingInfo:
    """GET oauth/training_info"""
    success: bool
    weight: float
    status: str
    signature: FitnessSignature
    tl: TrainingLoad
    target_xss: TrainingLoad
    source: str
    wotd: Optional[WorkoutOfTheDay] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "TrainingInfo":
        wotd = d.get("wotd")
        return cls(
            success=bool(d.get("success", False)),
            weight=d.get("weight") or 0,
            status=d.get("status", ""),
            signature=FitnessSignature.from_dict(d.get("signature") or {}),
            tl=TrainingLoad.from_dict(d.get("tl") or {}),
            target_xss=TrainingLoad.from_dict(d.get("targetXSS") or {}),
            source=d.get("source", ""),
            wotd=WorkoutOfTheDay.from_dict(wotd) if wotd else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with XERT's key names (targetXSS, wotd.workoutId)."""
        return {
            "success": self.success,
            "weight": self.weight,
            "status": self.status,
            "signature": asdict(self.signature),
            "tl": asdict(self.tl),
            "targetXSS": asdict(self.target_xss),
            "source": self.source,
            "wotd": self.wotd.to_dict() if self.wotd else None,
        }


@dataclass
class Workout:
    """Workout summary as listed by oauth/workouts. `path` is the workout id."""
    path: str
    name: str
    description: str = ""
    last_modified: int = 0

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Workout":
        return cls(
            path=d.get("path", ""),
            name=d.get("name", ""),
            description=d.get("description") or "",
            last_modified=d.get("last_modified") or 0,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class WorkoutInterval:
    """One interval set, resolved against the athlete's signature by XERT."""
    name: str
    index: int
    power: float
    duration: float
    interval_count: int = 1
    power_rest: Optional[float] = None
    duration_rest: Optional[float] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "WorkoutInterval":
        return cls(
            name=d.get("name", ""),
            index=d.get("index") or 0,
            power=d.get("power") or 0,
            duration=d.get("duration") or 0,
            interval_count=d.get("interval_count") or 1,
            power_rest=d.get("power_rest"),
            duration_rest=d.get("duration_rest"),
        )


@dataclass
class WorkoutDetail:
    """GET oauth/workout/{id}"""
    success: bool
    name: str
    description: str
    intervals: List[WorkoutInterval] = field(default_factory=list)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "WorkoutDetail":
        return cls(
            success=bool(d.get("success", False)),
            name=d.get("name", ""),
            description=d.get("description") or "",
            intervals=[WorkoutInterval.from_dict(i) for i in d.get("workout") or []],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "name": self.name,
            "description": self.description,
            "workout": [asdict(i) for i in self.intervals],
        }


@dataclass
class StartDate:
    """PHP-style date object: {"date": "2024-01-15 07:30:00.000000", ...}"""
    date: str
    timezone_type: int = 3
    timezone: str = "UTC"

    @classmethod
    def from_dict(cls, d: Optional[Dict[str, Any]]) -> Optional["StartDate"]:
        if not d:
            return None
        return cls(
            date=d.get("date", ""),
            timezone_type=d.get("timezone_type", 3),
            timezone=d.get("timezone", "UTC"),
        )


@dataclass
class ActivitySummary:
    """Activity as listed by oauth/activity. `path` is the activity id."""
    path: str
    name: str
    activity_type: str
    start_date: Optional[StartDate] = None
    description: str = ""

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ActivitySummary":
        return cls(
            path=d.get("path", ""),
            name=d.get("name", ""),
            activity_type=d.get("activity_type", ""),
            start_date=StartDate.from_dict(d.get("start_date")),
            description=d.get("description") or "",
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class SessionStats:
    max_power: float = 0
    avg_power: float = 0
    max_cadence: float = 0
    total_elevation_gain: float = 0
    total_calories: float = 0

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "SessionStats":
        return cls(
            max_power=d.get("max_power") or 0,
            avg_power=d.get("avg_power") or 0,
            max_cadence=d.get("max_cadence") or 0,
            total_elevation_gain=d.get("total_elevation_gain") or 0,
            total_calories=d.get("total_calories") or 0,
        )


@dataclass
class ProgressionLevels:
    ftp: float = 0
    hie: float = 0
    pp: float = 0

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ProgressionLevels":
        return cls(
            ftp=d.get("ftp") or 0,
            hie=d.get("hie") or 0,
            pp=d.get("pp") or 0,
        )


@dataclass
class Progression:
    """Training load (tl) and recovery load (rl) levels and form on the activity date."""
    date: str = ""
    tl: ProgressionLevels = field(default_factory=ProgressionLevels)
    rl: ProgressionLevels = field(default_factory=ProgressionLevels)
    form: float = 0

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Progression":
        return cls(
            date=d.get("date") or "",
            tl=ProgressionLevels.from_dict(d.get("tl") or {}),
            rl=ProgressionLevels.from_dict(d.get("rl") or {}),
            form=d.get("form") or 0,
        )


@dataclass
class ActivityMetrics:
    """The `summary` block of an activity: XSS, power and signature metrics."""
    xss: float = 0
    xlss: float = 0
    xhss: float = 0
    xpss: float = 0
    xep: float = 0
    mep: float = 0
    tws: float = 0
    sp: float = 0
    sfd: float = 0
    focus: str = ""
    specificity: str = ""
    difficulty: float = 0
    difficulty_rating: str = ""
    distance: float = 0
    duration: float = 0
    activity_type: str = ""
    sig: Optional[FitnessSignature] = None
    start_date: Optional[StartDate] = None
    session: Optional[SessionStats] = None
    medal: Optional[int] = None
    breakthrough: Optional[int] = None
    prev_sig: Optional[FitnessSignature] = None
    total_grams_carbs: Optional[float] = None
    total_grams_fat: Optional[float] = None
    training_status: Optional[float] = None
    freshness: Optional[str] = None
    progression: Optional[Progression] = None
    street_view: Optional[str] = None
    activity_map: Optional[str] = None
    chart_view: Optional[str] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ActivityMetrics":
        sig = d.get("sig")
        prev_sig = d.get("prev_sig")
        session = d.get("session")
        progression = d.get("progression")
        return cls(
            xss=d.get("xss") or 0,
            xlss=d.get("xlss") or 0,
            xhss=d.get("xhss") or 0,
            xpss=d.get("xpss") or 0,
            xep=d.get("xep") or 0,
            mep=d.get("mep") or 0,
            tws=d.get("tws") or 0,
            sp=d.get("sp") or 0,
            sfd=d.get("sfd") or 0,
            focus=d.get("focus") or "",
            specificity=d.get("specificity") or "",
            difficulty=d.get("difficulty") or 0,
            difficulty_rating=d.get("difficulty_rating") or "",
            distance=d.get("distance") or 0,
            duration=d.get("duration") or 0,
            activity_type=d.get("activity_type") or "",
            sig=FitnessSignature.from_dict(sig) if sig else None,
            start_date=StartDate.from_dict(d.get("start_date")),
            session=SessionStats.from_dict(session) if session else None,
            medal=d.get("medal"),
            breakthrough=d.get("breakthrough"),
            prev_sig=FitnessSignature.from_dict(prev_sig) if prev_sig else None,
            total_grams_carbs=d.get("total_grams_carbs"),
            total_grams_fat=d.get("total_grams_fat"),
            training_status=d.get("training_status"),
            freshness=d.get("freshness"),
            progression=Progression.from_dict(progression) if progression else None,
            street_view=d.get("street_view"),
            activity_map=d.get("activity_map"),
            chart_view=d.get("chart_view"),
        )


@dataclass
class SessionDataPoint:
    """One per-second sample. MPA is maximal power available at that second."""
    unix_time: int
    power: float = 0
    mpa: float = 0
    alt: float = 0
    spd: float = 0
    lat: float = 0
    lng: float = 0
    dist: float = 0
    tws: float = 0
    xds: float = 0
    cad: Optional[float] = None
    hr: Optional[float] = None
    tgt: Optional[float] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "SessionDataPoint":
        return cls(
            unix_time=d.get("unix_time") or 0,
            power=d.get("power") or 0,
            mpa=d.get("mpa") or 0,
            alt=d.get("alt") or 0,
            spd=d.get("spd") or 0,
            lat=d.get("lat") or 0,
            lng=d.get("lng") or 0,
            dist=d.get("dist") or 0,
            tws=d.get("tws") or 0,
            xds=d.get("xds") or 0,
            cad=d.get("cad"),
            hr=d.get("hr"),
            tgt=d.get("tgt"),
        )


@dataclass
class ActivityDetail:
    """GET oauth/activity/{id}. session_data is None unless requested."""
    success: bool
    name: str
    description: str
    summary: ActivityMetrics
    session_data: Optional[List[SessionDataPoint]] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ActivityDetail":
        session_data = d.get("session_data")
        return cls(
            success=bool(d.get("success", False)),
            name=d.get("name", ""),
            description=d.get("description") or "",
            summary=ActivityMetrics.from_dict(d.get("summary") or {}),
            session_data=(
                [SessionDataPoint.from_dict(p) for p in session_data]
                if session_data is not None else None
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        if self.session_data is None:
            del d["session_data"]
        return d


@dataclass
class UploadedFile:
    name: str
    size: int
    type: str
    url: str
    delete_type: Optional[str] = None
    delete_url: Optional[str] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "UploadedFile":
        return cls(
            name=d.get("name", ""),
            size=d.get("size") or 0,
            type=d.get("type", ""),
            url=d.get("url", ""),
            delete_type=d.get("deleteType"),
            delete_url=d.get("deleteUrl"),
        )

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["deleteType"] = d.pop("delete_type")
        d["deleteUrl"] = d.pop("delete_url")
        return d


@dataclass
class UploadResult:
    """POST oauth/upload"""
    success: bool
    files: List[UploadedFile] = field(default_factory=list)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "UploadResult":
        files = (d.get("json") or {}).get("files") or []
        return cls(
            success=bool(d.get("success", False)),
            files=[UploadedFile.from_dict(f) for f in files],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "json": {"files": [f.to_dict() for f in self.files]},
        }
