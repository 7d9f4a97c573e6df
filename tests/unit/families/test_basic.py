"""
Shared helpers for the family framework tests.

The helper family is an exponential law with a ``scale`` base
parametrization and a ``rate`` alternative that provides only its own CDF.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np

from pysatl_numerics.families import ParametricFamily, Parametrization, constraint
from pysatl_numerics.types import (
    CharacteristicName,
    GenericCharacteristicName,
    UnivariateContinuous,
)
from tests.utils.mocks import MockSamplingStrategy


def _exponential_characteristics() -> dict[GenericCharacteristicName, dict[str, object]]:
    return {
        CharacteristicName.PDF: {"scale": lambda p, x: np.exp(-np.asarray(x) / p.scale) / p.scale},
        CharacteristicName.CDF: {
            "scale": lambda p, x: -np.expm1(-np.asarray(x) / p.scale),
            "rate": lambda p, x: -np.expm1(-p.rate * np.asarray(x)),
        },
        CharacteristicName.PPF: {"scale": lambda p, q: -p.scale * np.log1p(-np.asarray(q))},
    }


class FamilyTestBase:
    PDF: GenericCharacteristicName = CharacteristicName.PDF
    CDF: GenericCharacteristicName = CharacteristicName.CDF
    PPF: GenericCharacteristicName = CharacteristicName.PPF

    def make_scale_family(
        self,
        distr_characteristics: dict[GenericCharacteristicName, dict[str, object]] | None = None,
        name: str = "ScaleFamily",
    ) -> ParametricFamily:
        family = ParametricFamily(
            name=name,
            distr_type=UnivariateContinuous,
            distr_parametrizations=["scale", "rate"],
            distr_characteristics=(  # type: ignore[arg-type]
                _exponential_characteristics()
                if distr_characteristics is None
                else distr_characteristics
            ),
            sampling_strategy=MockSamplingStrategy(),
        )

        @family.parametrization(name="scale")
        class Scale(Parametrization):
            scale: float

            @constraint("scale > 0")
            def check_scale_positive(self) -> bool:
                return self.scale > 0

        @family.parametrization(name="rate")
        class Rate(Parametrization):
            rate: float

            @constraint("rate > 0")
            def check_rate_positive(self) -> bool:
                return self.rate > 0

            def transform_to_base_parametrization(self) -> Parametrization:
                return Scale(scale=1.0 / self.rate)  # type: ignore[call-arg]

        return family
