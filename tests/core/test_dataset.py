"""
Tests for Dataset construction, factor access and row selection.
"""

import numpy as np
import pytest

from statsengine.core.dataset import Dataset, Observation
from statsengine.core.exceptions import DimensionError, InvalidInputError


@pytest.fixture
def small():
    return Dataset.from_arrays(
        [1.0, 2.0, 3.0, 4.0, 5.0, 6.0],
        response_name="len",
        supp=["VC", "OJ", "VC", "OJ", "VC", "OJ"],
        dose=[2, 0.5, 1, 2, 0.5, 1],
    )


class TestConstruction:

    def test_from_arrays(self, small):
        assert small.n_observations == 6
        assert len(small) == 6
        assert small.response_name == "len"
        assert small.factor_names == ("supp", "dose")
        assert small.metadata["source"] == "arrays"

    def test_default_levels_natural_order(self, small):
        assert small.levels("supp") == ("OJ", "VC")
        assert small.levels("dose") == (0.5, 1, 2)

    def test_explicit_levels(self):
        ds = Dataset.from_arrays(
            [1.0, 2.0], g=["lo", "hi"], levels={"g": ("lo", "hi")}
        )
        assert ds.levels("g") == ("lo", "hi")
        np.testing.assert_array_equal(ds.codes("g"), [0, 1])

    def test_label_outside_levels_rejected(self):
        with pytest.raises(InvalidInputError, match="not among the declared levels"):
            Dataset.from_arrays([1.0, 2.0], g=["a", "c"], levels={"g": ("a", "b")})

    def test_duplicate_levels_rejected(self):
        with pytest.raises(InvalidInputError, match="duplicates"):
            Dataset.from_arrays([1.0], g=["a"], levels={"g": ("a", "a")})

    def test_levels_for_unknown_factor_rejected(self):
        with pytest.raises(InvalidInputError, match="unknown factor"):
            Dataset.from_arrays([1.0], g=["a"], levels={"h": ("a",)})

    def test_length_mismatch(self):
        with pytest.raises(DimensionError):
            Dataset.from_arrays([1.0, 2.0, 3.0], g=["a", "b"])

    @pytest.mark.parametrize("bad", [np.nan, np.inf])
    def test_non_finite_response_rejected(self, bad):
        with pytest.raises(InvalidInputError, match="non-finite"):
            Dataset.from_arrays([1.0, bad], g=["a", "b"])

    def test_missing_label_rejected(self):
        with pytest.raises(InvalidInputError, match="missing label"):
            Dataset.from_arrays([1.0, 2.0], g=[0.5, float("nan")])

    def test_response_name_clash(self):
        with pytest.raises(InvalidInputError, match="both"):
            Dataset.from_arrays([1.0], response_name="g", g=["a"])

    def test_empty_dataset_allowed(self):
        ds = Dataset.from_arrays([], g=[])
        assert ds.n_observations == 0
        assert ds.levels("g") == ()

    def test_from_records(self):
        rows = [
            {"len": 4.2, "supp": "VC", "dose": 0.5},
            {"len": 15.2, "supp": "OJ", "dose": 0.5},
        ]
        ds = Dataset.from_records(rows, response="len", factors=["supp", "dose"])
        assert ds.n_observations == 2
        np.testing.assert_array_equal(ds.response, [4.2, 15.2])
        assert ds.metadata["source"] == "records"

    def test_from_records_missing_field(self):
        with pytest.raises(InvalidInputError, match="record 0"):
            Dataset.from_records([{"len": 1.0}], response="len", factors=["supp"])

    def test_from_records_non_numeric_response(self):
        rows = [{"len": 4.2, "supp": "VC"}, {"len": "abc", "supp": "OJ"}]
        with pytest.raises(InvalidInputError, match="len"):
            Dataset.from_records(rows, response="len", factors=["supp"])

    def test_from_records_empty(self):
        ds = Dataset.from_records([], response="len", factors=["supp"])
        assert ds.n_observations == 0

    def test_bool_and_numeric_labels_rejected(self):
        with pytest.raises(InvalidInputError, match="boolean"):
            Dataset.from_arrays([1.0, 2.0, 3.0], g=[True, 1, 2])

    def test_bool_label_against_numeric_levels_rejected(self):
        with pytest.raises(InvalidInputError, match="boolean"):
            Dataset.from_arrays([1.0, 2.0], g=[True, 0], levels={"g": (0, 1)})

    def test_bool_labels_alone(self):
        ds = Dataset.from_arrays([1.0, 2.0, 3.0], g=[True, False, True])
        assert ds.levels("g") == (False, True)

    def test_immutable_response(self, small):
        with pytest.raises(ValueError):
            small.response[0] = 99.0


class TestDataFrame:

    def test_from_dataframe(self):
        pd = pytest.importorskip("pandas")
        df = pd.DataFrame({
            "len": [4.2, 15.2, 16.5],
            "supp": ["VC", "OJ", "VC"],
            "dose": [0.5, 0.5, 1.0],
        })
        ds = Dataset.from_dataframe(df, response="len")
        assert ds.factor_names == ("supp", "dose")
        assert ds.levels("dose") == (0.5, 1.0)
        assert isinstance(ds.levels("dose")[0], float)

    def test_ordered_categorical_levels(self):
        pd = pytest.importorskip("pandas")
        df = pd.DataFrame({
            "len": [1.0, 2.0, 3.0],
            "grade": pd.Categorical(["mid", "low", "high"],
                                    categories=["low", "mid", "high"], ordered=True),
        })
        ds = Dataset.from_dataframe(df, response="len")
        assert ds.levels("grade") == ("low", "mid", "high")

    def test_unknown_response_column(self):
        pd = pytest.importorskip("pandas")
        df = pd.DataFrame({"a": [1.0]})
        with pytest.raises(InvalidInputError, match="response column"):
            Dataset.from_dataframe(df, response="len")

    def test_from_file_csv(self, tmp_path):
        pytest.importorskip("pandas")
        path = tmp_path / "tg.csv"
        path.write_text("len,supp,dose\n4.2,VC,0.5\n15.2,OJ,0.5\n16.5,VC,1\n")
        ds = Dataset.from_file(path, response="len")
        assert ds.n_observations == 3
        assert ds.metadata["source_path"] == str(path)
        assert ds.levels("supp") == ("OJ", "VC")

    def test_from_file_unknown_suffix(self, tmp_path):
        with pytest.raises(InvalidInputError, match="Unknown file format"):
            Dataset.from_file(tmp_path / "tg.xlsx", response="len")


class TestSelection:

    def test_unknown_factor(self, small):
        with pytest.raises(InvalidInputError, match="no factor 'sex'"):
            small.levels("sex")

    def test_responses_single_criterion(self, small):
        np.testing.assert_array_equal(small.responses(supp="VC"), [1.0, 3.0, 5.0])

    def test_responses_multiple_criteria(self, small):
        np.testing.assert_array_equal(small.responses(supp="OJ", dose=2), [4.0])

    def test_responses_any_of(self, small):
        np.testing.assert_array_equal(small.responses(dose=[0.5, 1]), [2.0, 3.0, 5.0, 6.0])

    def test_numeric_label_equivalence(self, small):
        np.testing.assert_array_equal(small.responses(dose=2.0), [1.0, 4.0])

    def test_where_mapping(self, small):
        np.testing.assert_array_equal(small.responses({"supp": "OJ"}), [2.0, 4.0, 6.0])

    def test_unmatched_label_selects_nothing(self, small):
        assert small.responses(supp="XX").shape == (0,)

    def test_subset_keeps_levels(self, small):
        sub = small.subset(supp="OJ")
        assert sub.n_observations == 3
        assert sub.levels("supp") == ("OJ", "VC")
        assert set(sub.factor("supp")) == {"OJ"}
        assert sub.metadata["n_observations"] == 3

    def test_records(self, small):
        recs = small.records()
        assert len(recs) == 6
        assert recs[0] == Observation(response=1.0, factors={"supp": "VC", "dose": 2})
        assert recs[1]["supp"] == "OJ"

    def test_records_are_immutable_and_hashable(self, small):
        rec = small.records()[0]
        assert rec.factors == (("supp", "VC"), ("dose", 2))
        assert rec.labels == {"supp": "VC", "dose": 2}
        assert hash(rec) == hash(Observation(1.0, {"supp": "VC", "dose": 2}))
        assert len(set(small.records())) == 6
        rec.labels["supp"] = "OJ"
        assert rec["supp"] == "VC"
        with pytest.raises(KeyError):
            rec["missing"]

    def test_repr(self, small):
        assert "n=6" in repr(small)
