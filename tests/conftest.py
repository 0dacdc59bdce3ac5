import os
import sys

# Lambda modules import each other by bare name, as they do once zipped.
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "Weather-Backend", "lambda")))
