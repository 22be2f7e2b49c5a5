import subprocess
import sys
import os


class WebTestRunner:
    def __init__(self, tests_dir: str, reports_dir: str = "reports"):
        self.tests_dir = tests_dir
        self.reports_dir = reports_dir

    def build_command(self, test_file: str = None, keyword: str = None, e2e: bool = True) -> list:
        cmd = [sys.executable, "-m", "pytest"]

        if test_file:
            cmd.append(os.path.join(self.tests_dir, test_file))
        else:
            cmd.append(self.tests_dir)

        if keyword:
            cmd.extend(["-k", keyword])
        if e2e:
            cmd.append("--e2e")

        report_path = os.path.join(self.reports_dir, "report.html")
        cmd.extend([f"--html={report_path}", "--self-contained-html"])
        return cmd

    def run_tests(self, test_file: str = None, keyword: str = None, e2e: bool = True) -> bool:
        """Run Playwright tests"""
        os.makedirs(self.reports_dir, exist_ok=True)
        cmd = self.build_command(test_file, keyword, e2e)

        try:
            subprocess.run(cmd, check=True, capture_output=True, text=True)
            print("Tests passed!")
            return True
        except subprocess.CalledProcessError as e:
            print(f"Tests failed: {e}")
            if e.stdout:
                print(e.stdout)
            return False
