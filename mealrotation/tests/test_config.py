import unittest
from pathlib import Path
from mealrotation.domain.GenerationConfig import ConfigurationError
from mealrotation.utilities.config import load_settings, DEFAULT_DATA_DIR


class TestLoadSettings(unittest.TestCase):

    def test_defaults(self):
        settings = load_settings({})
        self.assertEqual(settings.data_dir, Path(DEFAULT_DATA_DIR))
        self.assertEqual(settings.generation.days_to_generate, 7)
        self.assertTrue(settings.generation.allow_staple_repetition)
        self.assertEqual(settings.options_file_name, "meal_options.json")

    def test_overrides(self):
        settings = load_settings({
            'MEAL_PLANNER_DATA_DIR': '/tmp/rotation',
            'DAYS_TO_GENERATE': '14',
            'ALLOW_STAPLE_REPETITION': 'false',
            'PREVIOUS_PLAN_FILE_NAME': 'last_week.json',
        })
        self.assertEqual(settings.data_dir, Path('/tmp/rotation'))
        self.assertEqual(settings.generation.days_to_generate, 14)
        self.assertFalse(settings.generation.allow_staple_repetition)
        self.assertEqual(settings.previous_plan_file_name, 'last_week.json')

    def test_blank_or_zero_days_use_default(self):
        self.assertEqual(load_settings({'DAYS_TO_GENERATE': ''}).generation.days_to_generate, 7)
        self.assertEqual(load_settings({'DAYS_TO_GENERATE': '0'}).generation.days_to_generate, 7)

    def test_staple_flag_only_disabled_by_false(self):
        self.assertTrue(load_settings({'ALLOW_STAPLE_REPETITION': 'no'}).generation.allow_staple_repetition)

    def test_invalid_values_are_configuration_errors(self):
        with self.assertRaises(ConfigurationError):
            load_settings({'DAYS_TO_GENERATE': '-2'})
        with self.assertRaises(ConfigurationError):
            load_settings({'DAYS_TO_GENERATE': 'weekly'})
        with self.assertRaises(ConfigurationError):
            load_settings({'MEAL_PLANNER_DATA_DIR': '   '})

if __name__ == '__main__':
    unittest.main()
