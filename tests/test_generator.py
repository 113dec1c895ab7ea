"""Tests for full code generation.

Each test builds a PersonalInput and checks the 16-character code against
known values.
"""

from __future__ import annotations

from datetime import date

import pytest

from codicefiscale.encoding.checksum import validate_checksum, validate_format
from codicefiscale.encoding.generator import CodeGenerator, generate_code
from codicefiscale.exceptions import (
    DepthExceededError,
    MalformedInputError,
    UnknownCityError,
    UnknownNationError,
)
from codicefiscale.lookup import InMemoryPlaceLookup
from codicefiscale.models.enums import Sex
from codicefiscale.schemas.fiscal_code import PersonalInput


def _person(**overrides: object) -> PersonalInput:
    data: dict[str, object] = {
        "name": "Marco",
        "surname": "Bianchi",
        "sex": Sex.M,
        "birth_nation": "Italia",
        "birth_city": "Roma",
        "birth_date": date(1990, 3, 15),
    }
    data.update(overrides)
    return PersonalInput(**data)


class TestGenerate:
    @pytest.fixture()
    def generator(self, lookup: InMemoryPlaceLookup) -> CodeGenerator:
        return CodeGenerator(lookup)

    def test_male_roma(self, generator: CodeGenerator) -> None:
        result = generator.generate(_person())
        assert result.code == "BNCMRC90C15H501W"
        assert result.substitution_depth == 0

    def test_female_milano(self, generator: CodeGenerator) -> None:
        person = _person(
            name="Maria",
            surname="Rossi",
            sex=Sex.F,
            birth_city="Milano",
            birth_date=date(1985, 6, 12),
        )
        assert generator.generate(person).code == "RSSMRA85H52F205C"

    def test_foreign_birth_ignores_city(self, generator: CodeGenerator) -> None:
        person = _person(birth_nation="Germania", birth_city="Berlino")
        assert generator.generate(person).code == "BNCMRC90C15Z112H"

    def test_case_insensitive_place(self, generator: CodeGenerator) -> None:
        person = _person(birth_nation="ITALIA", birth_city="roma")
        assert generator.generate(person).code == "BNCMRC90C15H501W"

    def test_str_is_code(self, generator: CodeGenerator) -> None:
        assert str(generator.generate(_person())) == "BNCMRC90C15H501W"

    def test_unknown_city(self, generator: CodeGenerator) -> None:
        with pytest.raises(UnknownCityError):
            generator.generate(_person(birth_city="Atlantide"))

    def test_unknown_nation(self, generator: CodeGenerator) -> None:
        with pytest.raises(UnknownNationError):
            generator.generate(_person(birth_nation="Narnia"))

    def test_functional_shortcut(self, lookup: InMemoryPlaceLookup) -> None:
        assert generate_code(_person(), lookup) == CodeGenerator(lookup).generate(_person())


class TestGenerateHomocodic:
    @pytest.fixture()
    def generator(self, lookup: InMemoryPlaceLookup) -> CodeGenerator:
        return CodeGenerator(lookup)

    def test_depth_one(self, generator: CodeGenerator) -> None:
        result = generator.generate(_person(), substitution_depth=1)
        assert result.code == "BNCMRCV0C15H501L"
        assert result.substitution_depth == 1

    def test_depth_one_female(self, generator: CodeGenerator) -> None:
        person = _person(
            name="Maria",
            surname="Rossi",
            sex=Sex.F,
            birth_city="Milano",
            birth_date=date(1985, 6, 12),
        )
        assert generator.generate(person, substitution_depth=1).code == "RSSMRAU5H52F205Z"

    def test_checksum_recomputed(self, generator: CodeGenerator) -> None:
        plain = generator.generate(_person()).code
        homocode = generator.generate(_person(), substitution_depth=1).code
        assert plain[:15] != homocode[:15]
        assert plain[15] != homocode[15]
        assert validate_checksum(homocode)

    def test_max_depth(self, generator: CodeGenerator) -> None:
        assert generator.generate(_person(), substitution_depth=6).code == "BNCMRCV0CMRHRLMP"

    def test_depth_exceeded(self, generator: CodeGenerator) -> None:
        with pytest.raises(DepthExceededError):
            generator.generate(_person(), substitution_depth=7)

    def test_negative_depth(self, generator: CodeGenerator) -> None:
        with pytest.raises(MalformedInputError):
            generator.generate(_person(), substitution_depth=-1)


class TestLayout:
    """Every generated code has the fixed 16-character layout."""

    @pytest.mark.parametrize(
        ("name", "surname", "sex", "nation", "city", "birth_date"),
        [
            ("Anna", "Fo", Sex.F, "Italia", "Torino", date(2000, 2, 29)),
            ("Al", "O", Sex.M, "Côte d'Ivoire", "Abidjan", date(1977, 11, 30)),
            ("Giovanni Battista", "De Luca", Sex.M, "Italia", "Forlì", date(1960, 8, 1)),
            ("Éva", "Nagy", Sex.F, "Stati Uniti d'America", "Boston", date(2012, 10, 10)),
        ],
    )
    @pytest.mark.parametrize("depth", [0, 1, 4])
    def test_layout(
        self,
        lookup: InMemoryPlaceLookup,
        name: str,
        surname: str,
        sex: Sex,
        nation: str,
        city: str,
        birth_date: date,
        depth: int,
    ) -> None:
        person = PersonalInput(
            name=name,
            surname=surname,
            sex=sex,
            birth_nation=nation,
            birth_city=city,
            birth_date=birth_date,
        )
        code = CodeGenerator(lookup).generate(person, depth).code
        assert len(code) == 16
        assert code == code.upper()
        assert code[:6].isalpha()
        assert code[11:15].isalnum()
        assert code[15].isalpha()
        assert validate_format(code)
        assert validate_checksum(code)
