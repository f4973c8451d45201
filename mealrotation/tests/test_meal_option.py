import unittest
from mealrotation.domain.MealCategory import MealCategory, parse_category, coerce_category
from mealrotation.domain.MealOption import MealOption


class TestMealCategory(unittest.TestCase):

    def test_parse_known_values(self):
        self.assertEqual(parse_category("Lunch"), (MealCategory.LUNCH, True))
        self.assertEqual(parse_category("  dinner "), (MealCategory.DINNER, True))

    def test_parse_unknown_value_is_tagged(self):
        parsed = parse_category("Brunch")
        self.assertFalse(parsed.recognized)
        self.assertIsNone(parsed.category)
        self.assertFalse(parse_category(None).recognized)

    def test_coerce_unknown_defaults_to_breakfast_with_warning(self):
        with self.assertLogs('mealrotation.domain.MealCategory', level='WARNING') as logs:
            self.assertEqual(coerce_category("Snack"), MealCategory.BREAKFAST)
        self.assertIn("Snack", logs.output[0])

    def test_coerce_matches_any_case_without_warning(self):
        with self.assertNoLogs('mealrotation.domain.MealCategory', level='WARNING'):
            self.assertEqual(coerce_category("lunch"), MealCategory.LUNCH)
            self.assertEqual(coerce_category("DINNER"), MealCategory.DINNER)

    def test_slot_names(self):
        self.assertEqual([c.slot for c in MealCategory], ["breakfast", "lunch", "dinner"])


class TestMealOption(unittest.TestCase):

    def test_equality_uses_id_only(self):
        a = MealOption.create("x1", "Oats", MealCategory.BREAKFAST)
        b = MealOption.create("x1", "Porridge", MealCategory.BREAKFAST, is_staple=True)
        c = MealOption.create("x2", "Oats", MealCategory.BREAKFAST)
        self.assertEqual(a, b)
        self.assertNotEqual(a, c)
        self.assertEqual(len({a, b, c}), 2)

    def test_is_immutable(self):
        meal = MealOption.create("x1", "Oats", MealCategory.BREAKFAST)
        with self.assertRaises(AttributeError):
            meal.name = "Granola"

    def test_from_dict_normalizes_store_record(self):
        meal = MealOption.from_dict({"id": 7, "name": " Rajma ", "category": "lunch",
                                     "is_staple": "Yes", "tags": "beans, , north-indian"})
        self.assertEqual(meal.id, "7")
        self.assertEqual(meal.name, "Rajma")
        self.assertEqual(meal.category, MealCategory.LUNCH)
        self.assertTrue(meal.is_staple)
        self.assertEqual(meal.tags, frozenset({"beans", "north-indian"}))

    def test_from_dict_without_id_uses_name(self):
        meal = MealOption.from_dict({"name": "Khichdi", "category": "Dinner"})
        self.assertEqual(meal.id, "Khichdi")
        self.assertFalse(meal.is_staple)

    def test_to_dict(self):
        meal = MealOption.create("d1", "Khichdi", MealCategory.DINNER, tags=["light", "comfort"])
        self.assertEqual(meal.to_dict(), {"id": "d1", "name": "Khichdi", "category": "Dinner",
                                          "is_staple": False, "tags": ["comfort", "light"]})

if __name__ == '__main__':
    unittest.main()
