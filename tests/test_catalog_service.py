import threading

import pytest

from clinical_concepts_api.app.core.errors import CsvFormatError, IngestError, ValidationError
from clinical_concepts_api.app.schemas.concept import ClinicalConcept
from clinical_concepts_api.app.services.catalog_service import CatalogService
from clinical_concepts_api.app.services.seed_data import SEED_CONCEPTS


HEADER = "id,name,desc,p,c,alt\n"
SEED_IDS = [f"C{i:03d}" for i in range(1, 11)]


def dump_all(service):
    return [c.model_dump() for c in service.get_all()]


class TestAddOrUpdate:

    def test_idempotent(self, service):
        concept = ClinicalConcept(conceptId="C1", displayName="One", parentIds=["P1"])

        service.add_or_update(concept)
        once = dump_all(service)
        service.add_or_update(concept)

        assert dump_all(service) == once
        assert service.get_by_id("C1") == concept

    def test_last_writer_wins(self, service):
        first = ClinicalConcept(conceptId="C1", displayName="First", childIds=["A", "B"])
        second = ClinicalConcept(conceptId="C1", displayName="Second", description="d")

        service.add_or_update(first)
        service.add_or_update(second)

        assert service.get_by_id("C1") == second

    @pytest.mark.parametrize("concept_id,display_name", [
        ("", "X"),
        ("C1", ""),
    ])
    def test_rejects_empty_id_or_name(self, service, concept_id, display_name):
        service.add_or_update(ClinicalConcept(conceptId="C0", displayName="Zero"))
        before = dump_all(service)

        with pytest.raises(ValidationError):
            service.add_or_update(ClinicalConcept(conceptId=concept_id, displayName=display_name))

        assert dump_all(service) == before


class TestDelete:

    def test_unknown_id_is_silent(self, service):
        service.load_seed_set()
        before = dump_all(service)

        service.delete("does-not-exist")

        assert dump_all(service) == before

    def test_removes_record(self, service):
        service.load_seed_set()

        service.delete("C005")

        assert service.get_by_id("C005") is None
        assert len(service.get_all()) == 9


class TestSeedSet:

    def test_loads_exact_records_in_order(self, service):
        service.load_seed_set()

        concepts = service.get_all()
        assert [c.concept_id for c in concepts] == SEED_IDS
        assert [c.model_dump() for c in concepts] == SEED_CONCEPTS

    def test_spot_check_fields(self, service):
        service.load_seed_set()

        hypertension = service.get_by_id("C001")
        assert hypertension.display_name == "Hypertension"
        assert hypertension.parent_ids == ["P001", "P002"]
        assert hypertension.child_ids == ["C002", "C003"]
        assert hypertension.alternate_names == "High Blood Pressure"
        assert service.get_by_id("C005").child_ids == []
        assert service.get_by_id("C009").alternate_names == "COPD"

    def test_repeated_loads_are_idempotent(self, service):
        for _ in range(3):
            service.load_seed_set()

        assert [c.model_dump() for c in service.get_all()] == SEED_CONCEPTS

    def test_overwrites_prior_record(self, service):
        service.add_or_update(ClinicalConcept(conceptId="C001", displayName="X"))

        service.load_seed_set()

        assert service.get_by_id("C001").display_name == "Hypertension"

    def test_concurrent_loads(self, service):
        threads = [threading.Thread(target=service.load_seed_set) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert [c.model_dump() for c in service.get_all()] == SEED_CONCEPTS


class TestTabularResource:

    def test_loads_records_in_file_order(self, store, write_csv):
        path = write_csv(HEADER + "C200,Two,,,,\nC100,Flu,,,P9;P8,Influenza\n")
        service = CatalogService(store, csv_resource=path)

        assert service.load_tabular_resource() == 2

        assert [c.concept_id for c in service.get_all()] == ["C200", "C100"]
        flu = service.get_by_id("C100")
        assert flu.parent_ids == [""]
        assert flu.child_ids == ["P9", "P8"]
        assert flu.alternate_names == "Influenza"

    def test_rerun_does_not_duplicate(self, store, write_csv):
        service = CatalogService(store, csv_resource=write_csv(HEADER + "C1,One,,,,\n"))

        service.load_tabular_resource()
        service.load_tabular_resource()

        assert len(service.get_all()) == 1

    def test_malformed_line_keeps_preceding_records(self, store, write_csv):
        path = write_csv(HEADER + "C1,One,,,,\nBAD,only,three,fields\nC2,Two,,,,\n")
        service = CatalogService(store, csv_resource=path)

        with pytest.raises(CsvFormatError) as excinfo:
            service.load_tabular_resource()

        assert excinfo.value.line_number == 3
        assert [c.concept_id for c in service.get_all()] == ["C1"]

    def test_record_without_display_name_is_format_error(self, store, write_csv):
        path = write_csv(HEADER + "C1,One,,,,\nC2,,,,,\n")
        service = CatalogService(store, csv_resource=path)

        with pytest.raises(CsvFormatError) as excinfo:
            service.load_tabular_resource()

        assert excinfo.value.line_number == 3
        assert service.get_by_id("C2") is None

    def test_missing_resource(self, store, tmp_path):
        service = CatalogService(store, csv_resource=str(tmp_path / "absent.csv"))

        with pytest.raises(IngestError):
            service.load_tabular_resource()

        assert service.get_all() == []

    def test_bundled_resource(self, service):
        count = service.load_tabular_resource()

        assert count > 0
        assert len(service.get_all()) == count
