"""Tests for the role profile registry."""

import math
import os
import tempfile

import pytest
import yaml

from resume_screener.errors import ProfileConfigError
from resume_screener.roles.registry import (
    DEFAULT_REGISTRY,
    DIMENSIONS,
    RoleCategory,
    RoleProfile,
    RoleProfileRegistry,
    Weights,
    load_registry,
)


def make_profile(role=RoleCategory.RNS, **kwargs) -> RoleProfile:
    defaults = dict(
        role=role,
        skills=("nursing",),
        experience=("nurse",),
        education=("bsn",),
        certifications=("nclex",),
        weights=Weights(0.25, 0.25, 0.25, 0.25),
    )
    defaults.update(kwargs)
    return RoleProfile(**defaults)


def roles_yaml(roles: dict) -> str:
    with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False, encoding="utf-8") as f:
        yaml.dump({"roles": roles}, f)
        return f.name


def yaml_entry(**kwargs) -> dict:
    entry = {
        "skills": ["Triage"],
        "experience": ["nurse"],
        "education": ["bsn"],
        "certifications": ["bls"],
        "weights": {"skills": 0.4, "experience": 0.3, "education": 0.2, "certifications": 0.1},
    }
    entry.update(kwargs)
    return entry


class TestDefaultRegistry:
    def test_fixed_role_order(self):
        assert DEFAULT_REGISTRY.all_roles() == [
            RoleCategory.CUSTOMER_SERVICE,
            RoleCategory.MEDICAL_ASSISTANTS,
            RoleCategory.NPS,
            RoleCategory.RNS,
        ]
        assert len(DEFAULT_REGISTRY) == 4

    def test_weights_sum_to_one(self):
        for profile in DEFAULT_REGISTRY:
            assert math.isclose(sum(profile.weights), 1.0, abs_tol=1e-9)
            assert all(w >= 0 for w in profile.weights)

    def test_keyword_lists_non_empty_and_lowercase(self):
        for profile in DEFAULT_REGISTRY:
            for dimension in DIMENSIONS:
                keywords = profile.keywords(dimension)
                assert keywords
                assert all(k == k.lower() for k in keywords)

    def test_get_returns_profile_for_role(self):
        profile = DEFAULT_REGISTRY.get(RoleCategory.RNS)
        assert profile.role is RoleCategory.RNS
        assert "icu" in profile.experience
        assert profile.weight("experience") == 0.35

    def test_profiles_are_immutable(self):
        profile = DEFAULT_REGISTRY.get(RoleCategory.NPS)
        with pytest.raises(AttributeError):
            profile.skills = ("anything",)


class TestRoleProfileValidation:
    def test_weights_must_sum_to_one(self):
        with pytest.raises(ProfileConfigError, match="sum to 1.0"):
            make_profile(weights=Weights(0.5, 0.5, 0.5, 0.0))

    def test_negative_weight_rejected(self):
        with pytest.raises(ProfileConfigError, match="non-negative"):
            make_profile(weights=Weights(1.2, -0.2, 0.0, 0.0))

    def test_empty_keyword_list_rejected(self):
        with pytest.raises(ProfileConfigError, match="non-empty"):
            make_profile(certifications=())

    def test_duplicate_keywords_rejected(self):
        with pytest.raises(ProfileConfigError, match="duplicate"):
            make_profile(skills=("ekg", "EKG"))

    def test_keywords_normalized_to_lowercase(self):
        profile = make_profile(skills=("Patient Care", " IV Therapy "))
        assert profile.skills == ("patient care", "iv therapy")

    def test_registry_requires_every_role(self):
        with pytest.raises(ProfileConfigError, match="Missing role profiles"):
            RoleProfileRegistry({RoleCategory.RNS: make_profile()})

    def test_registry_rejects_mislabelled_profile(self):
        profiles = {role: make_profile(role=role) for role in RoleCategory}
        profiles[RoleCategory.NPS] = make_profile(role=RoleCategory.RNS)
        with pytest.raises(ProfileConfigError, match="labelled"):
            RoleProfileRegistry(profiles)

    def test_registry_iterates_in_enum_order(self):
        profiles = {role: make_profile(role=role) for role in reversed(list(RoleCategory))}
        registry = RoleProfileRegistry(profiles)
        assert registry.all_roles() == list(RoleCategory)


class TestRoleCategory:
    def test_from_display_name(self):
        assert RoleCategory.from_name("Medical Assistants") is RoleCategory.MEDICAL_ASSISTANTS
        assert RoleCategory.from_name("rns") is RoleCategory.RNS

    def test_from_member_name(self):
        assert RoleCategory.from_name("customer_service") is RoleCategory.CUSTOMER_SERVICE

    def test_unknown_role(self):
        with pytest.raises(ValueError, match="Unknown role"):
            RoleCategory.from_name("Janitor")


class TestLoadRegistry:
    def test_no_path_returns_default(self):
        assert load_registry(None) is DEFAULT_REGISTRY
        assert load_registry("") is DEFAULT_REGISTRY

    def test_loads_yaml_roles(self):
        path = roles_yaml({role.value: yaml_entry() for role in RoleCategory})
        try:
            registry = load_registry(path)
            profile = registry.get(RoleCategory.CUSTOMER_SERVICE)
            assert profile.skills == ("triage",)
            assert profile.weights == Weights(0.4, 0.3, 0.2, 0.1)
        finally:
            os.unlink(path)

    def test_missing_file(self):
        with pytest.raises(ProfileConfigError, match="not found"):
            load_registry("/nonexistent/roles.yaml")

    def test_missing_role_is_fatal(self):
        path = roles_yaml({"RNs": yaml_entry()})
        try:
            with pytest.raises(ProfileConfigError, match="Missing role profiles"):
                load_registry(path)
        finally:
            os.unlink(path)

    def test_unknown_role_is_fatal(self):
        roles = {role.value: yaml_entry() for role in RoleCategory}
        roles["Surgeons"] = yaml_entry()
        path = roles_yaml(roles)
        try:
            with pytest.raises(ProfileConfigError, match="Unknown role"):
                load_registry(path)
        finally:
            os.unlink(path)

    def test_bad_weights_are_fatal(self):
        roles = {role.value: yaml_entry() for role in RoleCategory}
        roles["NPs"] = yaml_entry(weights={"skills": 0.9, "experience": 0.9, "education": 0, "certifications": 0})
        path = roles_yaml(roles)
        try:
            with pytest.raises(ProfileConfigError, match="sum to 1.0"):
                load_registry(path)
        finally:
            os.unlink(path)

    def test_missing_weight_key_is_fatal(self):
        roles = {role.value: yaml_entry() for role in RoleCategory}
        roles["RNs"] = yaml_entry(weights={"skills": 1.0})
        path = roles_yaml(roles)
        try:
            with pytest.raises(ProfileConfigError, match="weights"):
                load_registry(path)
        finally:
            os.unlink(path)
