from __future__ import annotations

"""
Unit tests for the Component Hierarchy Service.

Uses the in-memory provider from conftest to exercise name resolution,
pagination, tree building and rendering end to end.
"""

import pytest

from modelhierarchy.core.hierarchy.service import HierarchyService
from modelhierarchy.domain.errors import (
    AmbiguousMatch,
    ProjectNotFound,
    ProviderProtocolError,
)
from modelhierarchy.domain.models import OccurrenceRecord, Page


def test_full_hierarchy_across_two_pages(hierarchy_provider):
    service = HierarchyService(hierarchy_provider, "tok")

    result = service.get_component_hierarchy("Shop", "Bench", "Vise")

    assert result.component_version_id == "CV-ROOT"
    assert result.hierarchy_text == (
        "Root (Vise)\n"
        "     Jaw\n"
        "          Pad\n"
        "     Screw\n"
    )
    assert result.root is not None
    assert hierarchy_provider.count("fetch_occurrence_page") == 2


def test_result_dict_uses_wire_keys(hierarchy_provider):
    result = HierarchyService(hierarchy_provider, "tok").get_component_hierarchy("Shop", "Bench", "Vise")
    assert result.to_dict() == {
        "componentVersionId": "CV-ROOT",
        "hierarchy": result.hierarchy_text,
    }


def test_unknown_component_yields_root_line_only(hierarchy_provider):
    service = HierarchyService(hierarchy_provider, "tok")

    result = service.get_component_hierarchy("Shop", "Bench", "Widget")

    assert result.component_version_id is None
    assert result.hierarchy_text == "Root (Widget)\n"
    assert result.root is None
    assert hierarchy_provider.count("fetch_occurrence_page") == 0


def test_unknown_project_raises(hierarchy_provider):
    service = HierarchyService(hierarchy_provider, "tok")

    with pytest.raises(ProjectNotFound) as exc_info:
        service.get_component_hierarchy("Shop", "Garage", "Vise")
    assert exc_info.value.project_name == "Garage"
    assert hierarchy_provider.count("resolve_component_version_ids") == 0


def test_custom_indent_width(hierarchy_provider):
    service = HierarchyService(hierarchy_provider, "tok", indent_width=2)

    result = service.get_component_hierarchy("Shop", "Bench", "Vise")

    assert result.hierarchy_text.splitlines()[2] == "    Pad"


def test_first_match_wins_by_default(make_provider):
    provider = make_provider(
        project_ids={("H", "P"): ["P1", "P2"]},
        version_ids={("P1", "C"): ["V1", "V2"]},
        occurrence_pages={"V1": [Page(records=[])]},
    )

    result = HierarchyService(provider, "tok").get_component_hierarchy("H", "P", "C")

    assert result.component_version_id == "V1"


def test_ambiguous_match_when_first_match_disabled(make_provider):
    provider = make_provider(project_ids={("H", "P"): ["P1", "P2"]})
    service = HierarchyService(provider, "tok", first_match_wins=False)

    with pytest.raises(AmbiguousMatch) as exc_info:
        service.get_component_hierarchy("H", "P", "C")
    assert exc_info.value.count == 2


def test_page_cap_is_forwarded(hierarchy_provider):
    service = HierarchyService(hierarchy_provider, "tok", max_pages=1)

    with pytest.raises(ProviderProtocolError):
        service.get_component_hierarchy("Shop", "Bench", "Vise")


def test_strict_orphans_surface_as_protocol_error(make_provider):
    provider = make_provider(
        project_ids={("H", "P"): ["P1"]},
        version_ids={("P1", "C"): ["V1"]},
        occurrence_pages={
            "V1": [Page(records=[OccurrenceRecord(child_id="A", child_name="A", parent_id="ghost")])]
        },
    )
    service = HierarchyService(provider, "tok", drop_orphans=False)

    with pytest.raises(ProviderProtocolError):
        service.get_component_hierarchy("H", "P", "C")
