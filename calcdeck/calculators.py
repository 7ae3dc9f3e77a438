"""Calculator registry and the result-or-error evaluation boundary.

Each :class:`Calculator` member names one calculator. Its registry entry
carries a display title, a category, the raw input fields it reads, and a
handler that parses those fields with :mod:`calcdeck.parsing` and calls the
pure formula functions.

:func:`evaluate` is the only place where :class:`~calcdeck.errors.CalculationError`
is caught. It always returns a :class:`CalculationResult`; any other
exception is a programming error and propagates.

Example:
    >>> result = evaluate(Calculator.COMBINATORICS, {"n": "5", "r": "2"})
    >>> result.value["combinations"]
    10
"""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass, fields, is_dataclass
from enum import Enum
from typing import (
    Any,
    Callable,
    Dict,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Type,
    TypeVar,
    Union,
)

import numpy as np

from . import arithmetic, computing, dates, finance, units
from .complex_numbers import ComplexNumber, complex_summary
from .currency import ExchangeRateClient, convert_currency, exchange_rate
from .errors import CalculationError, InvalidInput, OutOfRange
from .linalg import (
    MatrixOperation,
    Vector3,
    VectorOperation,
    apply_matrix_operation,
    apply_vector_operation,
)
from .parsing import parse_integer, parse_number, parse_optional_number, parse_series
from .physics import (
    KinematicsMode,
    astronomy,
    final_temperature,
    heat_energy,
    ideal_gas_pressure,
    kinematics,
    kinetic_energy,
    momentum,
    ohms_law,
    pv_work,
    work_power,
)
from .specialized import (
    ActivityLevel,
    Sex,
    UnitSystem,
    bmi,
    bmi_imperial,
    construction,
    daily_calories,
    molar_mass,
)
from .stats import (
    BinomialParams,
    DiscreteBound,
    NormalParams,
    NormalTail,
    PoissonParams,
    binomial_probability,
    correlation,
    describe,
    linear_regression,
    normal_probability,
    poisson_probability,
    z_score_probability,
)

logger = logging.getLogger(__name__)

Inputs = Mapping[str, Any]
E = TypeVar("E", bound=Enum)

_TRUE_TEXT = {"1", "true", "yes", "y", "on"}


class Category(Enum):
    BASIC = "Basic"
    SCIENTIFIC = "Scientific"
    STATISTICS = "Statistics"
    FINANCIAL = "Financial"
    ENGINEERING = "Engineering"
    CONVERSION = "Conversion"
    SPECIALIZED = "Specialized"
    DATETIME = "Date & Time"
    COMPUTING = "Computer Science"


class Calculator(Enum):
    ARITHMETIC = "arithmetic"
    PERCENTAGE = "percentage"
    SQUARE_ROOT = "square-root"
    CUBE_ROOT = "cube-root"
    POWER_ROOT = "power-root"
    FACTORIAL = "factorial"
    COMBINATORICS = "combinatorics"
    LOGARITHM = "logarithm"
    TRIGONOMETRY = "trigonometry"
    EXPONENTIAL = "exponential"
    COMPLEX = "complex"
    MATRIX = "matrix"
    VECTOR = "vector"
    DESCRIPTIVE_STATS = "descriptive-stats"
    REGRESSION = "regression"
    CORRELATION = "correlation"
    NORMAL_DISTRIBUTION = "normal-distribution"
    POISSON_DISTRIBUTION = "poisson-distribution"
    BINOMIAL_DISTRIBUTION = "binomial-distribution"
    Z_SCORE = "z-score"
    COMPOUND_INTEREST = "compound-interest"
    SIMPLE_INTEREST = "simple-interest"
    EMI = "emi"
    INVESTMENT = "investment"
    PROFIT_LOSS = "profit-loss"
    TAX = "tax"
    OHMS_LAW = "ohms-law"
    KINEMATICS = "kinematics"
    WORK_POWER = "work-power"
    KINETIC_ENERGY = "kinetic-energy"
    HEAT = "heat"
    FINAL_TEMPERATURE = "final-temperature"
    IDEAL_GAS = "ideal-gas"
    PV_WORK = "pv-work"
    LENGTH = "length"
    MASS = "mass"
    PRESSURE = "pressure"
    FORCE = "force"
    TEMPERATURE = "temperature"
    CURRENCY = "currency"
    BMI = "bmi"
    CALORIES = "calories"
    MOLAR_MASS = "molar-mass"
    CONSTRUCTION = "construction"
    ASTRONOMY = "astronomy"
    DATE_DIFFERENCE = "date-difference"
    DATE_ARITHMETIC = "date-arithmetic"
    WORKDAYS = "workdays"
    TIME_ZONE = "time-zone"
    NUMBER_BASE = "number-base"
    BITWISE = "bitwise"
    STRING_HASH = "string-hash"
    COMPLEXITY = "complexity"

    @property
    def entry(self) -> "CalculatorEntry":
        return REGISTRY[self]

    @property
    def title(self) -> str:
        return self.entry.title

    @property
    def category(self) -> Category:
        return self.entry.category


@dataclass(frozen=True)
class CalculatorEntry:
    title: str
    category: Category
    fields: Tuple[str, ...]
    handler: Callable[[Inputs], Any]


@dataclass(frozen=True)
class CalculationResult:
    """Outcome of one calculator evaluation.

    Exactly one of ``value`` and ``error`` is meaningful: a successful
    result has ``error`` set to ``None``.
    """

    value: Any = None
    error: Optional[str] = None
    error_kind: Optional[str] = None
    field: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


# ---------------------------------------------------------------------------
# Field helpers
# ---------------------------------------------------------------------------


def _num(inputs: Inputs, key: str) -> float:
    return parse_number(inputs.get(key), key)


def _opt(inputs: Inputs, key: str) -> Optional[float]:
    return parse_optional_number(inputs.get(key), key)


def _int(inputs: Inputs, key: str, minimum: Optional[int] = None) -> int:
    return parse_integer(inputs.get(key), key, minimum)


def _text(inputs: Inputs, key: str, default: Optional[str] = None) -> str:
    raw = inputs.get(key)
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        if default is None:
            raise InvalidInput(f"{key} is required", field=key)
        return default
    return str(raw).strip()


def _flag(inputs: Inputs, key: str) -> bool:
    raw = inputs.get(key)
    if isinstance(raw, bool):
        return raw
    return str(raw or "").strip().lower() in _TRUE_TEXT


def _choice(inputs: Inputs, key: str, enum_cls: Type[E], default: Optional[E] = None) -> E:
    """Resolve a field to an enum member by value or name, case-insensitively."""
    raw = inputs.get(key)
    if isinstance(raw, enum_cls):
        return raw
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        if default is None:
            raise InvalidInput(f"{key} is required", field=key)
        return default
    wanted = str(raw).strip().lower().replace("-", "_")
    for member in enum_cls:
        if wanted in (str(member.value).lower().replace("-", "_"), member.name.lower()):
            return member
    options = ", ".join(str(m.value) for m in enum_cls)
    raise InvalidInput(f"Invalid {key} {raw!r}; expected one of: {options}", field=key)


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


def _arithmetic(inputs: Inputs) -> float:
    op = _choice(inputs, "operation", arithmetic.ArithmeticOperation)
    return arithmetic.apply_operation(op, _num(inputs, "a"), _num(inputs, "b"))


def _percentage(inputs: Inputs) -> Dict[str, float]:
    value = _num(inputs, "value")
    percent = _opt(inputs, "percent")
    total = _opt(inputs, "total")
    if percent is None and total is None:
        raise InvalidInput("Enter either a percent or a total", field="percent")
    out = {}
    if percent is not None:
        out["percent_of_value"] = arithmetic.percentage_of(value, percent)
    if total is not None:
        out["percent_of_total"] = arithmetic.percentage(value, total)
    return out


def _square_root(inputs: Inputs) -> Dict[str, float]:
    value = _num(inputs, "value")
    return {"square": arithmetic.square(value), "square_root": arithmetic.square_root(value)}


def _cube_root(inputs: Inputs) -> Dict[str, float]:
    value = _num(inputs, "value")
    return {"cube": arithmetic.cube(value), "cube_root": arithmetic.cube_root(value)}


def _power_root(inputs: Inputs) -> Dict[str, float]:
    base = _num(inputs, "base")
    exponent = _num(inputs, "exponent")
    return {
        "power": arithmetic.power(base, exponent),
        "root": arithmetic.nth_root(base, exponent),
    }


def _factorial(inputs: Inputs) -> Dict[str, int]:
    n = _int(inputs, "n")
    out = {"factorial": arithmetic.factorial(n)}
    if _flag(inputs, "double"):
        out["double_factorial"] = arithmetic.double_factorial(n)
    return out


def _combinatorics(inputs: Inputs) -> Dict[str, int]:
    n, r = _int(inputs, "n"), _int(inputs, "r")
    return {
        "combinations": arithmetic.combinations(n, r),
        "permutations": arithmetic.permutations(n, r),
    }


def _logarithm(inputs: Inputs) -> Dict[str, float]:
    value = _num(inputs, "value")
    out = arithmetic.logarithms(value)
    base = _opt(inputs, "base")
    if base is not None:
        out["log_base"] = arithmetic.log_base(value, base)
    return out


def _trigonometry(inputs: Inputs) -> Dict[str, Optional[float]]:
    unit = _choice(inputs, "unit", arithmetic.AngleUnit, arithmetic.AngleUnit.DEGREES)
    return arithmetic.trigonometry(_num(inputs, "angle"), unit)


def _exponential(inputs: Inputs) -> Dict[str, float]:
    return arithmetic.exponential(_num(inputs, "base"), _num(inputs, "exponent"))


def _complex(inputs: Inputs) -> Dict[str, object]:
    a = ComplexNumber(_num(inputs, "a_real"), _num(inputs, "a_imag"))
    b = ComplexNumber(_num(inputs, "b_real"), _num(inputs, "b_imag"))
    return complex_summary(a, b)


def _matrix(inputs: Inputs) -> Any:
    op = _choice(inputs, "operation", MatrixOperation)
    b = inputs.get("b")
    if isinstance(b, str) and not b.strip():
        b = None
    return apply_matrix_operation(op, inputs.get("a"), b)


def _vector(inputs: Inputs) -> Union[Vector3, float]:
    op = _choice(inputs, "operation", VectorOperation)
    a = Vector3.from_sequence(inputs.get("a"), "a")
    b = None
    if op is not VectorOperation.SCALE:
        b = Vector3.from_sequence(inputs.get("b"), "b")
    result = apply_vector_operation(op, a, b, inputs.get("scalar"))
    if isinstance(result, Vector3):
        # Reported alongside the components.
        result.magnitude
    return result


def _descriptive(inputs: Inputs):
    return describe(parse_series(inputs.get("data"), "data"))


def _regression(inputs: Inputs):
    return linear_regression(parse_series(inputs.get("x"), "x"), parse_series(inputs.get("y"), "y"))


def _correlation(inputs: Inputs) -> float:
    return correlation(parse_series(inputs.get("x"), "x"), parse_series(inputs.get("y"), "y"))


def _normal(inputs: Inputs):
    params = NormalParams(_num(inputs, "mean"), _num(inputs, "std_dev"))
    tail = _choice(inputs, "tail", NormalTail, NormalTail.LESS_THAN)
    return normal_probability(params, _num(inputs, "x"), tail, _opt(inputs, "x2"))


def _poisson(inputs: Inputs):
    params = PoissonParams(_num(inputs, "lam"))
    bound = _choice(inputs, "bound", DiscreteBound, DiscreteBound.EXACTLY)
    return poisson_probability(params, _int(inputs, "k", 0), bound)


def _binomial(inputs: Inputs):
    params = BinomialParams(_int(inputs, "n", 1), _num(inputs, "p"))
    bound = _choice(inputs, "bound", DiscreteBound, DiscreteBound.EXACTLY)
    return binomial_probability(params, _int(inputs, "k", 0), bound)


def _z_score(inputs: Inputs) -> Dict[str, float]:
    return z_score_probability(_num(inputs, "value"), _num(inputs, "mean"), _num(inputs, "std_dev"))


def _compound_interest(inputs: Inputs):
    frequency = _opt(inputs, "frequency")
    return finance.compound_interest(
        _num(inputs, "principal"),
        _num(inputs, "rate"),
        _num(inputs, "years"),
        12 if frequency is None else frequency,
    )


def _simple_interest(inputs: Inputs):
    return finance.simple_interest(
        _num(inputs, "principal"), _num(inputs, "rate"), _num(inputs, "years")
    )


def _emi(inputs: Inputs):
    return finance.loan_summary(
        _num(inputs, "principal"), _num(inputs, "rate"), _num(inputs, "years")
    )


def _investment(inputs: Inputs):
    return finance.investment_future_value(
        _num(inputs, "principal"),
        _opt(inputs, "monthly") or 0.0,
        _num(inputs, "rate"),
        _num(inputs, "years"),
    )


def _profit_loss(inputs: Inputs):
    return finance.profit_loss(
        _num(inputs, "cost_price"), _num(inputs, "selling_price"), _opt(inputs, "discount")
    )


def _tax(inputs: Inputs):
    return finance.tax(_num(inputs, "amount"), _num(inputs, "rate"), _flag(inputs, "included"))


def _ohms_law(inputs: Inputs):
    return ohms_law(_opt(inputs, "voltage"), _opt(inputs, "current"), _opt(inputs, "resistance"))


def _kinematics(inputs: Inputs):
    return kinematics(
        _choice(inputs, "mode", KinematicsMode),
        initial_velocity=_opt(inputs, "initial_velocity"),
        final_velocity=_opt(inputs, "final_velocity"),
        acceleration=_opt(inputs, "acceleration"),
        time=_opt(inputs, "time"),
        displacement=_opt(inputs, "displacement"),
    )


def _work_power(inputs: Inputs):
    return work_power(_num(inputs, "force"), _num(inputs, "distance"), _opt(inputs, "time"))


def _kinetic_energy(inputs: Inputs) -> Dict[str, float]:
    mass, velocity = _num(inputs, "mass"), _num(inputs, "velocity")
    return {"kinetic_energy": kinetic_energy(mass, velocity), "momentum": momentum(mass, velocity)}


def _heat(inputs: Inputs):
    return heat_energy(
        _num(inputs, "mass"),
        _num(inputs, "specific_heat"),
        _num(inputs, "initial_temperature"),
        _num(inputs, "final_temperature"),
    )


def _final_temperature(inputs: Inputs) -> float:
    return final_temperature(
        _num(inputs, "mass"),
        _num(inputs, "specific_heat"),
        _num(inputs, "initial_temperature"),
        _num(inputs, "heat"),
    )


def _ideal_gas(inputs: Inputs) -> float:
    moles = _opt(inputs, "moles")
    return ideal_gas_pressure(
        _num(inputs, "volume"), _num(inputs, "temperature"), 1.0 if moles is None else moles
    )


def _pv_work(inputs: Inputs) -> float:
    return pv_work(_num(inputs, "pressure"), _num(inputs, "volume"))


def _unit_converter(category: units.UnitCategory) -> Callable[[Inputs], float]:
    def handler(inputs: Inputs) -> float:
        return units.convert(
            _num(inputs, "value"), _text(inputs, "from"), _text(inputs, "to"), category
        )

    return handler


def _temperature(inputs: Inputs) -> float:
    return units.convert_temperature(
        _num(inputs, "value"),
        _choice(inputs, "from", units.TemperatureUnit),
        _choice(inputs, "to", units.TemperatureUnit),
    )


def _currency(inputs: Inputs) -> Dict[str, float]:
    rates = ExchangeRateClient().fetch_rates() if _flag(inputs, "live") else None
    source, target = _text(inputs, "from"), _text(inputs, "to")
    return {
        "amount": convert_currency(_num(inputs, "amount"), source, target, rates),
        "rate": exchange_rate(source, target, rates),
    }


def _bmi(inputs: Inputs):
    system = _choice(inputs, "units", UnitSystem, UnitSystem.METRIC)
    if system is UnitSystem.IMPERIAL:
        return bmi_imperial(_num(inputs, "weight"), _text(inputs, "height"))
    return bmi(_num(inputs, "weight"), _num(inputs, "height") / 100.0)


def _calories(inputs: Inputs):
    return daily_calories(
        _num(inputs, "age"),
        _choice(inputs, "sex", Sex),
        _num(inputs, "height"),
        _num(inputs, "weight"),
        _choice(inputs, "activity", ActivityLevel, ActivityLevel.SEDENTARY),
    )


def _molar_mass(inputs: Inputs) -> float:
    return molar_mass(_text(inputs, "formula"))


def _construction(inputs: Inputs):
    mode = _text(inputs, "mode", "area").lower()
    length, width = _num(inputs, "length"), _num(inputs, "width")
    if mode == "area":
        return construction.area(length, width)
    height = _num(inputs, "height")
    if mode == "volume":
        return construction.volume(length, width, height)
    if mode == "materials":
        return construction.materials(length, width, height)
    if mode == "cost":
        return construction.cost(length, width, height)
    raise InvalidInput(
        f"Invalid mode {mode!r}; expected one of: area, volume, materials, cost", field="mode"
    )


def _astronomy(inputs: Inputs):
    return astronomy(_text(inputs, "body", "earth"), _num(inputs, "mass"), _num(inputs, "distance"))


def _date_difference(inputs: Inputs):
    return dates.date_difference(inputs.get("start"), inputs.get("end"))


def _date_arithmetic(inputs: Inputs):
    return dates.date_arithmetic(
        inputs.get("date"),
        _int(inputs, "amount"),
        _choice(inputs, "unit", dates.TimeUnit),
        _choice(inputs, "operation", dates.DateOperation, dates.DateOperation.ADD),
    )


def _workdays(inputs: Inputs):
    holidays = _opt(inputs, "holidays")
    return dates.workdays(
        inputs.get("start"),
        inputs.get("end"),
        0 if holidays is None else _int(inputs, "holidays", 0),
    )


def _time_zone(inputs: Inputs):
    return dates.convert_timezone(
        inputs.get("datetime"), _text(inputs, "from_zone", "UTC"), _text(inputs, "to_zone")
    )


def _number_base(inputs: Inputs) -> Dict[str, str]:
    number = _text(inputs, "number")
    if inputs.get("to_base") in (None, ""):
        system = _choice(inputs, "system", computing.NumberSystem, computing.NumberSystem.DECIMAL)
        return computing.number_systems(number, system)
    return {
        "result": computing.convert_base(
            number, _int(inputs, "from_base"), _int(inputs, "to_base")
        )
    }


def _bitwise(inputs: Inputs):
    op = _choice(inputs, "operation", computing.BitwiseOperation)
    b = _opt(inputs, "b")
    shift = _opt(inputs, "shift")
    return computing.bitwise(
        op,
        _int(inputs, "a"),
        None if b is None else _int(inputs, "b"),
        1 if shift is None else _int(inputs, "shift", 0),
    )


def _string_hash(inputs: Inputs) -> str:
    text = inputs.get("text")
    return computing.string_hash("" if text is None else str(text))


def _complexity(inputs: Inputs):
    growth = computing.complexity_growth(_int(inputs, "n"))
    return {c.value: ops for c, ops in growth.items()}


REGISTRY: Dict[Calculator, CalculatorEntry] = {
    Calculator.ARITHMETIC: CalculatorEntry(
        "Basic Arithmetic", Category.BASIC, ("a", "b", "operation"), _arithmetic
    ),
    Calculator.PERCENTAGE: CalculatorEntry(
        "Percentage", Category.BASIC, ("value", "percent", "total"), _percentage
    ),
    Calculator.SQUARE_ROOT: CalculatorEntry(
        "Square & Square Root", Category.BASIC, ("value",), _square_root
    ),
    Calculator.CUBE_ROOT: CalculatorEntry(
        "Cube & Cube Root", Category.BASIC, ("value",), _cube_root
    ),
    Calculator.POWER_ROOT: CalculatorEntry(
        "Power & Nth Root", Category.BASIC, ("base", "exponent"), _power_root
    ),
    Calculator.FACTORIAL: CalculatorEntry(
        "Factorial", Category.SCIENTIFIC, ("n", "double"), _factorial
    ),
    Calculator.COMBINATORICS: CalculatorEntry(
        "Combinations & Permutations", Category.SCIENTIFIC, ("n", "r"), _combinatorics
    ),
    Calculator.LOGARITHM: CalculatorEntry(
        "Logarithm", Category.SCIENTIFIC, ("value", "base"), _logarithm
    ),
    Calculator.TRIGONOMETRY: CalculatorEntry(
        "Trigonometry", Category.SCIENTIFIC, ("angle", "unit"), _trigonometry
    ),
    Calculator.EXPONENTIAL: CalculatorEntry(
        "Exponential", Category.SCIENTIFIC, ("base", "exponent"), _exponential
    ),
    Calculator.COMPLEX: CalculatorEntry(
        "Complex Numbers", Category.SCIENTIFIC, ("a_real", "a_imag", "b_real", "b_imag"), _complex
    ),
    Calculator.MATRIX: CalculatorEntry(
        "Matrix", Category.SCIENTIFIC, ("operation", "a", "b"), _matrix
    ),
    Calculator.VECTOR: CalculatorEntry(
        "Vector", Category.SCIENTIFIC, ("operation", "a", "b", "scalar"), _vector
    ),
    Calculator.DESCRIPTIVE_STATS: CalculatorEntry(
        "Descriptive Statistics", Category.STATISTICS, ("data",), _descriptive
    ),
    Calculator.REGRESSION: CalculatorEntry(
        "Linear Regression", Category.STATISTICS, ("x", "y"), _regression
    ),
    Calculator.CORRELATION: CalculatorEntry(
        "Correlation", Category.STATISTICS, ("x", "y"), _correlation
    ),
    Calculator.NORMAL_DISTRIBUTION: CalculatorEntry(
        "Normal Distribution", Category.STATISTICS, ("mean", "std_dev", "x", "tail", "x2"), _normal
    ),
    Calculator.POISSON_DISTRIBUTION: CalculatorEntry(
        "Poisson Distribution", Category.STATISTICS, ("lam", "k", "bound"), _poisson
    ),
    Calculator.BINOMIAL_DISTRIBUTION: CalculatorEntry(
        "Binomial Distribution", Category.STATISTICS, ("n", "p", "k", "bound"), _binomial
    ),
    Calculator.Z_SCORE: CalculatorEntry(
        "Z-Score", Category.STATISTICS, ("value", "mean", "std_dev"), _z_score
    ),
    Calculator.COMPOUND_INTEREST: CalculatorEntry(
        "Compound Interest",
        Category.FINANCIAL,
        ("principal", "rate", "years", "frequency"),
        _compound_interest,
    ),
    Calculator.SIMPLE_INTEREST: CalculatorEntry(
        "Simple Interest", Category.FINANCIAL, ("principal", "rate", "years"), _simple_interest
    ),
    Calculator.EMI: CalculatorEntry(
        "Loan EMI", Category.FINANCIAL, ("principal", "rate", "years"), _emi
    ),
    Calculator.INVESTMENT: CalculatorEntry(
        "Investment", Category.FINANCIAL, ("principal", "monthly", "rate", "years"), _investment
    ),
    Calculator.PROFIT_LOSS: CalculatorEntry(
        "Profit & Loss",
        Category.FINANCIAL,
        ("cost_price", "selling_price", "discount"),
        _profit_loss,
    ),
    Calculator.TAX: CalculatorEntry(
        "Tax / GST", Category.FINANCIAL, ("amount", "rate", "included"), _tax
    ),
    Calculator.OHMS_LAW: CalculatorEntry(
        "Ohm's Law", Category.ENGINEERING, ("voltage", "current", "resistance"), _ohms_law
    ),
    Calculator.KINEMATICS: CalculatorEntry(
        "Kinematics",
        Category.ENGINEERING,
        ("mode", "initial_velocity", "final_velocity", "acceleration", "time", "displacement"),
        _kinematics,
    ),
    Calculator.WORK_POWER: CalculatorEntry(
        "Work & Power", Category.ENGINEERING, ("force", "distance", "time"), _work_power
    ),
    Calculator.KINETIC_ENERGY: CalculatorEntry(
        "Kinetic Energy & Momentum", Category.ENGINEERING, ("mass", "velocity"), _kinetic_energy
    ),
    Calculator.HEAT: CalculatorEntry(
        "Heat Energy",
        Category.ENGINEERING,
        ("mass", "specific_heat", "initial_temperature", "final_temperature"),
        _heat,
    ),
    Calculator.FINAL_TEMPERATURE: CalculatorEntry(
        "Final Temperature",
        Category.ENGINEERING,
        ("mass", "specific_heat", "initial_temperature", "heat"),
        _final_temperature,
    ),
    Calculator.IDEAL_GAS: CalculatorEntry(
        "Ideal Gas Pressure", Category.ENGINEERING, ("volume", "temperature", "moles"), _ideal_gas
    ),
    Calculator.PV_WORK: CalculatorEntry(
        "Pressure-Volume Work", Category.ENGINEERING, ("pressure", "volume"), _pv_work
    ),
    Calculator.LENGTH: CalculatorEntry(
        "Length",
        Category.CONVERSION,
        ("value", "from", "to"),
        _unit_converter(units.UnitCategory.LENGTH),
    ),
    Calculator.MASS: CalculatorEntry(
        "Weight & Mass",
        Category.CONVERSION,
        ("value", "from", "to"),
        _unit_converter(units.UnitCategory.MASS),
    ),
    Calculator.PRESSURE: CalculatorEntry(
        "Pressure",
        Category.CONVERSION,
        ("value", "from", "to"),
        _unit_converter(units.UnitCategory.PRESSURE),
    ),
    Calculator.FORCE: CalculatorEntry(
        "Force",
        Category.CONVERSION,
        ("value", "from", "to"),
        _unit_converter(units.UnitCategory.FORCE),
    ),
    Calculator.TEMPERATURE: CalculatorEntry(
        "Temperature", Category.CONVERSION, ("value", "from", "to"), _temperature
    ),
    Calculator.CURRENCY: CalculatorEntry(
        "Currency", Category.CONVERSION, ("amount", "from", "to", "live"), _currency
    ),
    Calculator.BMI: CalculatorEntry(
        "BMI", Category.SPECIALIZED, ("weight", "height", "units"), _bmi
    ),
    Calculator.CALORIES: CalculatorEntry(
        "Calories", Category.SPECIALIZED, ("age", "sex", "height", "weight", "activity"), _calories
    ),
    Calculator.MOLAR_MASS: CalculatorEntry(
        "Molar Mass", Category.SPECIALIZED, ("formula",), _molar_mass
    ),
    Calculator.CONSTRUCTION: CalculatorEntry(
        "Construction", Category.SPECIALIZED, ("mode", "length", "width", "height"), _construction
    ),
    Calculator.ASTRONOMY: CalculatorEntry(
        "Astronomy", Category.SPECIALIZED, ("body", "mass", "distance"), _astronomy
    ),
    Calculator.DATE_DIFFERENCE: CalculatorEntry(
        "Date Difference", Category.DATETIME, ("start", "end"), _date_difference
    ),
    Calculator.DATE_ARITHMETIC: CalculatorEntry(
        "Date Arithmetic",
        Category.DATETIME,
        ("date", "amount", "unit", "operation"),
        _date_arithmetic,
    ),
    Calculator.WORKDAYS: CalculatorEntry(
        "Workdays", Category.DATETIME, ("start", "end", "holidays"), _workdays
    ),
    Calculator.TIME_ZONE: CalculatorEntry(
        "Time Zone", Category.DATETIME, ("datetime", "from_zone", "to_zone"), _time_zone
    ),
    Calculator.NUMBER_BASE: CalculatorEntry(
        "Number Systems",
        Category.COMPUTING,
        ("number", "system", "from_base", "to_base"),
        _number_base,
    ),
    Calculator.BITWISE: CalculatorEntry(
        "Bitwise", Category.COMPUTING, ("operation", "a", "b", "shift"), _bitwise
    ),
    Calculator.STRING_HASH: CalculatorEntry(
        "String Hash", Category.COMPUTING, ("text",), _string_hash
    ),
    Calculator.COMPLEXITY: CalculatorEntry(
        "Algorithm Complexity", Category.COMPUTING, ("n",), _complexity
    ),
}


def resolve_calculator(name: Union[str, Calculator]) -> Calculator:
    """Look up a calculator by member, value (``"compound-interest"``) or name.

    Raises:
        InvalidInput: If no calculator matches.
    """
    if isinstance(name, Calculator):
        return name
    return _choice({"calculator": name}, "calculator", Calculator)


def calculators_by_category() -> Dict[Category, List[Calculator]]:
    grouped: Dict[Category, List[Calculator]] = {c: [] for c in Category}
    for calc in Calculator:
        grouped[calc.category].append(calc)
    return grouped


def _require_finite(value: Any) -> None:
    """Reject a result holding an overflowed or undefined float anywhere inside it."""
    if isinstance(value, numbers.Integral):
        return
    if isinstance(value, numbers.Real):
        if not math.isfinite(value):
            raise OutOfRange("Result is too large to represent")
    elif isinstance(value, np.ndarray):
        if value.dtype.kind in "fc" and not np.isfinite(value).all():
            raise OutOfRange("Result is too large to represent")
    elif is_dataclass(value) and not isinstance(value, type):
        for f in fields(value):
            _require_finite(getattr(value, f.name))
    elif isinstance(value, Mapping):
        for item in value.values():
            _require_finite(item)
    elif isinstance(value, Sequence) and not isinstance(value, str):
        for item in value:
            _require_finite(item)


def evaluate(
    calculator: Union[str, Calculator], inputs: Optional[Inputs] = None
) -> CalculationResult:
    """Parse raw inputs, run one calculator and capture any calculation error.

    Args:
        calculator (Calculator | str): Calculator to run.
        inputs (Mapping[str, Any] | None): Raw field values, usually strings.

    Returns:
        CalculationResult: ``value`` on success; ``error``, ``error_kind`` and
        ``field`` when the inputs were rejected.
    """
    try:
        calc = resolve_calculator(calculator)
        value = calc.entry.handler(inputs or {})
        _require_finite(value)
    except CalculationError as e:
        logger.info("Rejected %s input: %s", calculator, e)
        return CalculationResult(error=str(e), error_kind=e.kind, field=e.field)
    logger.debug("Evaluated %s", calc.value)
    return CalculationResult(value=value)
