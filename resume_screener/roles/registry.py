"""Static role profiles: keyword tables and dimension weights per role."""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional

import yaml

from resume_screener.errors import ProfileConfigError

logger = logging.getLogger("resume_screener.roles")

DIMENSIONS = ("skills", "experience", "education", "certifications")

WEIGHT_TOLERANCE = 1e-6


class RoleCategory(str, Enum):
    """Closed set of roles a document is scored against."""

    CUSTOMER_SERVICE = "Customer Service"
    MEDICAL_ASSISTANTS = "Medical Assistants"
    NPS = "NPs"
    RNS = "RNs"

    @classmethod
    def from_name(cls, name: str) -> "RoleCategory":
        """Look up a role by display name or enum member name (case-insensitive)."""
        wanted = name.strip().lower()
        for role in cls:
            if wanted in (role.value.lower(), role.name.lower()):
                return role
        raise ValueError(f"Unknown role: {name!r} (expected one of: {', '.join(r.value for r in cls)})")


class Weights(NamedTuple):
    skills: float
    experience: float
    education: float
    certifications: float


@dataclass(frozen=True)
class RoleProfile:
    """Keyword lists and weights for one role. Validated on construction."""

    role: RoleCategory
    skills: tuple[str, ...]
    experience: tuple[str, ...]
    education: tuple[str, ...]
    certifications: tuple[str, ...]
    weights: Weights

    def __post_init__(self):
        for dimension in DIMENSIONS:
            keywords = tuple(k.strip().lower() for k in getattr(self, dimension))
            if not keywords or not all(keywords):
                raise ProfileConfigError(f"{self.role.value}: '{dimension}' keyword list must be non-empty")
            if len(set(keywords)) != len(keywords):
                raise ProfileConfigError(f"{self.role.value}: duplicate keywords in '{dimension}'")
            object.__setattr__(self, dimension, keywords)

        weights = Weights(*(float(w) for w in self.weights))
        if any(w < 0 for w in weights):
            raise ProfileConfigError(f"{self.role.value}: weights must be non-negative, got {weights}")
        if not math.isclose(sum(weights), 1.0, abs_tol=WEIGHT_TOLERANCE):
            raise ProfileConfigError(
                f"{self.role.value}: weights must sum to 1.0, got {sum(weights):.4f}"
            )
        object.__setattr__(self, "weights", weights)

    def keywords(self, dimension: str) -> tuple[str, ...]:
        return getattr(self, dimension)

    def weight(self, dimension: str) -> float:
        return getattr(self.weights, dimension)


class RoleProfileRegistry:
    """Read-only mapping RoleCategory -> RoleProfile covering every role."""

    def __init__(self, profiles: Mapping[RoleCategory, RoleProfile]):
        missing = [role.value for role in RoleCategory if role not in profiles]
        if missing:
            raise ProfileConfigError(f"Missing role profiles: {', '.join(missing)}")
        for role, profile in profiles.items():
            if profile.role is not role:
                raise ProfileConfigError(f"Profile for {role.value} is labelled {profile.role.value}")
        # Iteration order is always the enum order, regardless of input order
        self._profiles = MappingProxyType({role: profiles[role] for role in RoleCategory})

    def get(self, role: RoleCategory) -> RoleProfile:
        return self._profiles[role]

    def all_roles(self) -> list[RoleCategory]:
        return list(self._profiles)

    def __iter__(self):
        return iter(self._profiles.values())

    def __len__(self) -> int:
        return len(self._profiles)


_DEFAULT_TABLE = {
    RoleCategory.CUSTOMER_SERVICE: dict(
        skills=[
            "customer service", "communication", "phone", "email", "problem solving",
            "multitasking", "appointment scheduling", "data entry", "typing",
            "conflict resolution", "empathy", "active listening", "patience",
            "microsoft office", "excel", "word", "outlook", "crm",
        ],
        experience=[
            "customer service", "receptionist", "front desk", "call center",
            "client relations", "patient relations", "administrative assistant",
            "office coordinator", "scheduler",
        ],
        education=[
            "high school", "associate", "bachelor", "business", "communication",
            "hospitality", "healthcare administration",
        ],
        certifications=["customer service certification", "medical receptionist"],
        weights=Weights(skills=0.30, experience=0.40, education=0.15, certifications=0.15),
    ),
    RoleCategory.MEDICAL_ASSISTANTS: dict(
        skills=[
            "patient care", "vitals", "blood pressure", "temperature", "height",
            "weight", "phlebotomy", "injection", "ekg", "ecg",
            "wound care", "dressing", "sutures", "medical terminology",
            "ehr", "electronic health records", "appointment scheduling",
            "insurance", "billing", "coding", "cpt", "icd-10", "cpr", "bls",
            "medication administration", "specimen collection", "urinalysis",
            "point of care testing", "glucose monitoring",
        ],
        experience=[
            "medical assistant", "clinical assistant", "patient care technician",
            "certified medical assistant", "cma", "pct", "nursing assistant",
            "healthcare assistant",
        ],
        education=[
            "medical assistant", "cma", "certified medical assistant",
            "associate", "diploma", "certificate program", "healthcare",
        ],
        certifications=[
            "cma", "certified medical assistant", "cpr", "bls", "certified",
            "phlebotomy certification", "ekg certification",
        ],
        weights=Weights(skills=0.35, experience=0.35, education=0.20, certifications=0.10),
    ),
    RoleCategory.NPS: dict(
        skills=[
            "patient assessment", "diagnosis", "treatment", "prescribing",
            "medication management", "care plan", "chronic disease management",
            "primary care", "family practice", "internal medicine",
            "patient education", "health promotion", "preventive care",
            "clinical decision making", "diagnostic reasoning", "ehr",
            "telemedicine", "collaborative practice", "autonomous practice",
        ],
        experience=[
            "nurse practitioner", "np", "advanced practice", "primary care provider",
            "family nurse practitioner", "fnp", "adult gerontology", "agnp",
            "pediatric nurse practitioner", "pnp", "clinical nurse specialist",
            "provider", "clinician",
        ],
        education=[
            "nurse practitioner", "np", "master of science in nursing", "msn",
            "doctor of nursing practice", "dnp", "advanced practice",
            "bachelor of science in nursing", "bsn", "registered nurse",
        ],
        certifications=[
            "nurse practitioner", "np certification", "fnp", "agnp", "pnp",
            "ancc", "aanp", "board certified", "license", "prescriptive authority",
            "dea", "controlled substances",
        ],
        weights=Weights(skills=0.30, experience=0.30, education=0.25, certifications=0.15),
    ),
    RoleCategory.RNS: dict(
        skills=[
            "nursing", "patient care", "assessment", "care plan", "medication",
            "iv therapy", "wound care", "patient education", "discharge planning",
            "documentation", "charting", "care coordination", "collaboration",
            "critical thinking", "clinical judgment", "patient advocacy",
            "medication administration", "nursing process", "nursing diagnosis",
            "acute care", "chronic care", "rehabilitation", "geriatrics",
        ],
        experience=[
            "registered nurse", "rn", "staff nurse", "nurse", "charge nurse",
            "clinical nurse", "bedside nurse", "nurse manager", "nurse supervisor",
            "hospital", "clinic", "long term care", "skilled nursing", "home health",
            "icu", "er", "emergency", "med surg", "medical surgical",
            "critical care", "cardiac", "orthopedic", "oncology", "pediatric",
        ],
        education=[
            "registered nurse", "rn", "bachelor of science in nursing", "bsn",
            "associate degree in nursing", "adn", "diploma in nursing",
            "nursing program", "nursing school",
        ],
        certifications=[
            "registered nurse", "rn license", "nclex", "state license",
            "bls", "cpr", "acls", "pals", "tncc", "certified",
            "cvicu", "ccrn", "oncology certified", "wound care certified",
        ],
        weights=Weights(skills=0.30, experience=0.35, education=0.20, certifications=0.15),
    ),
}


def _build_registry(table: Mapping[RoleCategory, dict]) -> RoleProfileRegistry:
    profiles = {}
    for role, entry in table.items():
        profiles[role] = RoleProfile(
            role=role,
            skills=tuple(entry["skills"]),
            experience=tuple(entry["experience"]),
            education=tuple(entry["education"]),
            certifications=tuple(entry["certifications"]),
            weights=Weights(*entry["weights"]),
        )
    return RoleProfileRegistry(profiles)


DEFAULT_REGISTRY = _build_registry(_DEFAULT_TABLE)


def load_registry(roles_path: Optional[str] = None) -> RoleProfileRegistry:
    """Return the default registry, or one built from a YAML roles file.

    The YAML file has a top-level ``roles`` mapping keyed by role display name;
    each entry lists ``skills``, ``experience``, ``education``,
    ``certifications`` and a ``weights`` mapping with the same four keys.
    Every role must be present. Raises ProfileConfigError on any problem.
    """
    if not roles_path:
        return DEFAULT_REGISTRY

    path = Path(roles_path)
    if not path.exists():
        raise ProfileConfigError(f"Roles file not found: {roles_path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ProfileConfigError(f"Roles file is not valid YAML: {e}") from e

    roles_raw = raw.get("roles")
    if not isinstance(roles_raw, dict):
        raise ProfileConfigError(f"Roles file {roles_path} has no 'roles' mapping")

    table = {}
    for name, entry in roles_raw.items():
        try:
            role = RoleCategory.from_name(str(name))
        except ValueError as e:
            raise ProfileConfigError(str(e)) from e

        if not isinstance(entry, dict):
            raise ProfileConfigError(f"{role.value}: profile entry must be a mapping")
        weights_raw = entry.get("weights") or {}
        try:
            weights = Weights(*(float(weights_raw[d]) for d in DIMENSIONS))
        except (KeyError, TypeError, ValueError) as e:
            raise ProfileConfigError(f"{role.value}: weights must give a number for each of {DIMENSIONS}") from e

        table[role] = {d: [str(k) for k in entry.get(d) or []] for d in DIMENSIONS}
        table[role]["weights"] = weights

    registry = _build_registry(table)
    logger.info("Loaded %d role profiles from %s", len(registry), roles_path)
    return registry
