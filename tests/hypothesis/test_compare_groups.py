"""
Tests for compare_groups() on ToothGrowth.

R reference values:
    t.test(len ~ supp, data = ToothGrowth)
    t.test(len ~ supp, data = ToothGrowth, var.equal = TRUE)
    t.test(len ~ dose, data = subset(ToothGrowth, dose %in% c(a, b)))
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from statsengine import compare_groups, t_test
from statsengine.core.dataset import Dataset
from statsengine.core.exceptions import InsufficientDataError, InvalidInputError


class TestSupplement:

    def test_welch_does_not_reject(self, tg):
        result = compare_groups(tg, "supp", "OJ", "VC")
        assert result.statistic == pytest.approx(1.9153, rel=1e-4)
        assert result.df == pytest.approx(55.309, rel=1e-4)
        assert result.p_value == pytest.approx(0.06063, rel=1e-3)
        assert_allclose(result.conf_int, [-0.1710156, 7.5710156], rtol=1e-6)
        assert result.conf_int[0] < 0 < result.conf_int[1]
        assert result.p_value > 0.05
        assert not result.reject()
        assert result.mean_x == pytest.approx(20.66333, rel=1e-6)
        assert result.mean_y == pytest.approx(16.96333, rel=1e-6)

    def test_pooled(self, tg):
        result = compare_groups(tg, "supp", "OJ", "VC", var_equal=True)
        assert result.statistic == pytest.approx(1.9153, rel=1e-4)
        assert result.df == 58.0
        assert result.p_value == pytest.approx(0.06039, rel=1e-3)
        assert_allclose(result.conf_int, [-0.1670064, 7.5670064], rtol=1e-6)

    def test_within_dose(self, tg, vc_low, oj_low):
        result = compare_groups(tg, "supp", "VC", "OJ", where={"dose": 0.5})
        direct = t_test(vc_low, oj_low)
        assert result.statistic == pytest.approx(direct.statistic, rel=1e-14)
        assert result.p_value == pytest.approx(direct.p_value, rel=1e-14)
        assert result.data_name == "len by supp (VC vs OJ) where dose=0.5"


class TestDose:

    @pytest.mark.parametrize("a,b,t,df,p,ci", [
        (0.5, 1.0, -6.4766, 37.986, 1.268e-07, (-11.983781, -6.276219)),
        (1.0, 2.0, -4.9005, 37.101, 1.906e-05, (-8.996481, -3.733519)),
        (0.5, 2.0, -11.799, 36.883, 4.398e-14, (-18.15617, -12.83383)),
    ])
    def test_two_sided_reference(self, tg, a, b, t, df, p, ci):
        result = compare_groups(tg, "dose", a, b)
        assert result.statistic == pytest.approx(t, rel=1e-4)
        assert result.df == pytest.approx(df, rel=1e-4)
        assert result.p_value == pytest.approx(p, rel=1e-3)
        assert_allclose(result.conf_int, ci, rtol=1e-6)

    @pytest.mark.parametrize("a,b", [(0.5, 1.0), (1.0, 2.0), (0.5, 2.0)])
    def test_lower_dose_is_less_at_99(self, tg, a, b):
        result = compare_groups(tg, "dose", a, b, alternative="less", conf_level=0.99)
        assert result.conf_int[0] == -np.inf
        assert result.conf_int[1] < 0
        assert result.p_value < 0.01
        assert result.reject()

    def test_one_sided_is_half_two_sided(self, tg):
        two = compare_groups(tg, "dose", 0.5, 1.0)
        less = compare_groups(tg, "dose", 0.5, 1.0, alternative="less")
        assert less.p_value == pytest.approx(two.p_value / 2, rel=1e-12)

    def test_data_name(self, tg):
        assert compare_groups(tg, "dose", 1.0, 2.0).data_name == "len by dose (1.0 vs 2.0)"


class TestErrors:

    def test_unknown_factor(self, tg):
        with pytest.raises(InvalidInputError, match="no factor"):
            compare_groups(tg, "sex", "M", "F")

    def test_unknown_level(self, tg):
        with pytest.raises(InvalidInputError, match="not a level"):
            compare_groups(tg, "dose", 0.5, 3.0)

    def test_same_level(self, tg):
        with pytest.raises(InvalidInputError, match="itself"):
            compare_groups(tg, "supp", "OJ", "OJ")

    def test_where_on_compared_factor(self, tg):
        with pytest.raises(InvalidInputError, match="must not constrain"):
            compare_groups(tg, "supp", "OJ", "VC", where={"supp": "OJ"})

    def test_where_unknown_factor(self, tg):
        with pytest.raises(InvalidInputError, match="no factor"):
            compare_groups(tg, "supp", "OJ", "VC", where={"sex": "M"})

    def test_insufficient_group(self):
        ds = Dataset.from_arrays([1.0, 2.0, 3.0], g=["a", "a", "b"])
        with pytest.raises(InsufficientDataError) as info:
            compare_groups(ds, "g", "a", "b")
        assert info.value.name == "g=b"
        assert info.value.n == 1

    def test_not_a_dataset(self):
        with pytest.raises(InvalidInputError, match="Dataset"):
            compare_groups({"len": [1.0]}, "supp", "OJ", "VC")
