"""Catalog data models.

These models represent restaurants, their menus and the dishes on them.
Dishes carry their own running rating, which is the only part of the catalog
mutated after creation.
"""

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from foodmate.models.rating_models import RunningRating


class CuisineType(str, Enum):
    """Cuisine tags. ANY is a filter wildcard and never a real tag."""

    INDIAN = "indian"
    ITALIAN = "italian"
    CHINESE = "chinese"
    MEXICAN = "mexican"
    JAPANESE = "japanese"
    OTHER = "other"
    ANY = "any"


class CourseType(str, Enum):
    """Meal slots. ANY is a filter wildcard and never a real tag."""

    BREAKFAST = "breakfast"
    BRUNCH = "brunch"
    LUNCH = "lunch"
    SNACKS = "snacks"
    DINNER = "dinner"
    DESSERT = "dessert"
    ANY = "any"


class DietaryType(str, Enum):
    """Dietary types. BOTH is a filter wildcard and never a real tag."""

    VEG = "veg"
    NON_VEG = "non_veg"
    BOTH = "both"


class Dish(BaseModel):
    """Dish model."""

    model_config = ConfigDict(json_encoders={Decimal: str})

    dish_id: str = Field(..., description="Identifier, unique within the catalog")
    name: str = Field(..., description="Dish name, unique within its menu", min_length=1)
    price: Decimal = Field(..., description="Unit price", gt=0, decimal_places=2)
    dietary_type: DietaryType = Field(..., description="Veg or non-veg")
    cuisine: CuisineType = Field(..., description="Cuisine tag")
    course: CourseType = Field(..., description="Course tag")
    rating: RunningRating = Field(default_factory=RunningRating, description="Food rating")

    @field_validator("dietary_type")
    @classmethod
    def validate_dietary_type(cls, v: DietaryType) -> DietaryType:
        """Reject the filter wildcard as a dish's own type."""
        if v == DietaryType.BOTH:
            raise ValueError("dietary_type must be veg or non_veg")
        return v

    @field_validator("cuisine")
    @classmethod
    def validate_cuisine(cls, v: CuisineType) -> CuisineType:
        """Reject the filter wildcard as a dish's own cuisine."""
        if v == CuisineType.ANY:
            raise ValueError("cuisine must not be the 'any' wildcard")
        return v

    @field_validator("course")
    @classmethod
    def validate_course(cls, v: CourseType) -> CourseType:
        """Reject the filter wildcard as a dish's own course."""
        if v == CourseType.ANY:
            raise ValueError("course must not be the 'any' wildcard")
        return v

    def matches(
        self,
        cuisine: CuisineType = CuisineType.ANY,
        course: CourseType = CourseType.ANY,
        dietary_type: DietaryType = DietaryType.BOTH,
    ) -> bool:
        """Check the dish against a filter, treating wildcards as always matching.

        Args:
            cuisine: Cuisine to match, or CuisineType.ANY
            course: Course to match, or CourseType.ANY
            dietary_type: Dietary type to match, or DietaryType.BOTH

        Returns:
            bool: True if all three predicates match
        """
        cuisine_match = cuisine == CuisineType.ANY or self.cuisine == cuisine
        course_match = course == CourseType.ANY or self.course == course
        type_match = dietary_type == DietaryType.BOTH or self.dietary_type == dietary_type
        return cuisine_match and course_match and type_match


class Menu(BaseModel):
    """Ordered collection of dishes owned by one restaurant.

    Dish names are unique within a menu, so lookups by name are unambiguous.
    Everything else (carts, orders, rating updates) refers to dishes by id.
    """

    dishes: list[Dish] = Field(default_factory=list, description="Dishes in display order")

    def add_dish(self, dish: Dish) -> bool:
        """Append a dish to the menu.

        Args:
            dish: Dish to add

        Returns:
            bool: True if added, False if the name or id is already on the menu
        """
        if self.get_dish_by_name(dish.name) is not None or self.get_dish(dish.dish_id) is not None:
            return False

        self.dishes.append(dish)
        return True

    def remove_dish(self, name: str) -> bool:
        """Remove the dish with the given name.

        Returns:
            bool: True if a dish was removed, False if no dish has that name
        """
        dish = self.get_dish_by_name(name)
        if dish is None:
            return False

        self.dishes.remove(dish)
        return True

    def get_dish(self, dish_id: str) -> Dish | None:
        """Get a dish by id, None if absent."""
        return next((d for d in self.dishes if d.dish_id == dish_id), None)

    def get_dish_by_name(self, name: str) -> Dish | None:
        """Get a dish by name, None if absent."""
        return next((d for d in self.dishes if d.name == name), None)

    def filter_dishes(
        self,
        cuisine: CuisineType = CuisineType.ANY,
        course: CourseType = CourseType.ANY,
        dietary_type: DietaryType = DietaryType.BOTH,
    ) -> list[Dish]:
        """Return the dishes matching all three filters, in menu order.

        Args:
            cuisine: Cuisine filter (CuisineType.ANY for no filter)
            course: Course filter (CourseType.ANY for no filter)
            dietary_type: Dietary filter (DietaryType.BOTH for no filter)

        Returns:
            list: Matching dishes, empty list if nothing matches
        """
        return [dish for dish in self.dishes if dish.matches(cuisine, course, dietary_type)]


class Restaurant(BaseModel):
    """Restaurant model.

    Ownership is held by the owning RestaurantOwner as a list of restaurant ids;
    the restaurant itself does not point back at its owner.
    """

    restaurant_id: str = Field(..., description="Unique restaurant identifier")
    name: str = Field(..., description="Restaurant name")
    cuisine: CuisineType = Field(..., description="Primary cuisine")
    contact_email: str = Field(..., description="Contact email address")
    branches: list[str] = Field(
        default_factory=lambda: ["Main Street Branch"], description="Branch names"
    )
    rating: RunningRating = Field(
        default_factory=lambda: RunningRating(average=4.5, count=1),
        description="Running food rating",
    )
    menu: Menu = Field(default_factory=Menu, description="Restaurant menu")
