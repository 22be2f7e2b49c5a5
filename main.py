import os
import logging

from config.config_loader import DEFAULT_CONFIG_PATH, load_config
from test_runners.web_runner import WebTestRunner

WEB_TESTS_FILE = os.path.join("web", "test_rozetka_main.py")


class RozetkaCheckSuite:
    def __init__(self, config_path: str = DEFAULT_CONFIG_PATH):
        self.config = load_config(config_path)

        self.web_runner = WebTestRunner(
            self.config["paths"]["tests_dir"],
            self.config["paths"]["reports_dir"],
        )

        os.makedirs(self.config["paths"]["reports_dir"], exist_ok=True)

    # ============================================================
    # SCENARIOS
    # ============================================================
    def run_page_view_check(self):
        print("\nChecking default page layout...")
        return self.web_runner.run_tests(WEB_TESTS_FILE, keyword="basic_page_view")

    def run_basket_flow_check(self):
        print("\nChecking add to basket flow...")
        return self.web_runner.run_tests(WEB_TESTS_FILE, keyword="basic_flow")

    def run_all(self):
        print(f"\nRunning storefront checks against {self.config['project']['base_url']}")
        passed = self.web_runner.run_tests(WEB_TESTS_FILE)
        print("\nChecks completed")
        return passed


# ============================================================
# ENTRY POINT
# ============================================================
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    suite = RozetkaCheckSuite()
    raise SystemExit(0 if suite.run_all() else 1)
