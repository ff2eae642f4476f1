"""Dependency Injection container.

Provides centralized dependency management for the application.
"""

from typing import Optional

from application.use_cases import (
    AddSizeVariantUseCase,
    CalculateServingsUseCase,
    GenerateDescriptionUseCase,
    ParseDescriptionUseCase,
    ScaleWeightUseCase,
)
from domain.services.auto_population import AutoPopulationRules
from domain.services.description_generator import DescriptionGenerator
from domain.services.description_parser import DescriptionParser


class Container:
    """Dependency injection container.

    Provides singleton instances of services and use cases.
    """

    def __init__(self) -> None:
        # Lazy-initialized singletons
        self._description_parser: Optional[DescriptionParser] = None
        self._description_generator: Optional[DescriptionGenerator] = None

        self._parse_description_use_case: Optional[ParseDescriptionUseCase] = None
        self._generate_description_use_case: Optional[GenerateDescriptionUseCase] = None
        self._calculate_servings_use_case: Optional[CalculateServingsUseCase] = None
        self._scale_weight_use_case: Optional[ScaleWeightUseCase] = None
        self._add_size_variant_use_case: Optional[AddSizeVariantUseCase] = None

    # Domain Services
    @property
    def description_parser(self) -> DescriptionParser:
        """Get description parser."""
        if self._description_parser is None:
            self._description_parser = DescriptionParser()
        return self._description_parser

    @property
    def description_generator(self) -> DescriptionGenerator:
        """Get description generator."""
        if self._description_generator is None:
            self._description_generator = DescriptionGenerator()
        return self._description_generator

    def new_auto_population_rules(self) -> AutoPopulationRules:
        """Rules carry per-form state, so each presenter gets its own."""
        return AutoPopulationRules()

    # Use Cases
    @property
    def parse_description(self) -> ParseDescriptionUseCase:
        """Get parse description use case."""
        if self._parse_description_use_case is None:
            self._parse_description_use_case = ParseDescriptionUseCase(self.description_parser)
        return self._parse_description_use_case

    @property
    def generate_description(self) -> GenerateDescriptionUseCase:
        """Get generate description use case."""
        if self._generate_description_use_case is None:
            self._generate_description_use_case = GenerateDescriptionUseCase(
                self.description_generator
            )
        return self._generate_description_use_case

    @property
    def calculate_servings(self) -> CalculateServingsUseCase:
        """Get calculate servings use case."""
        if self._calculate_servings_use_case is None:
            self._calculate_servings_use_case = CalculateServingsUseCase()
        return self._calculate_servings_use_case

    @property
    def scale_weight(self) -> ScaleWeightUseCase:
        """Get scale weight use case."""
        if self._scale_weight_use_case is None:
            self._scale_weight_use_case = ScaleWeightUseCase()
        return self._scale_weight_use_case

    @property
    def add_size_variant(self) -> AddSizeVariantUseCase:
        """Get add size variant use case."""
        if self._add_size_variant_use_case is None:
            self._add_size_variant_use_case = AddSizeVariantUseCase()
        return self._add_size_variant_use_case
