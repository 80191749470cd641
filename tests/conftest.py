import matplotlib

# Headless backend for plot tests
matplotlib.use("Agg")
