# Centralized help text for the numbers printed in the run report.

METRIC_TOOLTIPS = {
    "slope": "Change in fitted Y per unit of X (OLS, closed form).",
    "intercept": "Fitted Y at X = 0.",
    "r2": "R^2 = 1 - RSS/TSS. Share of Y variance explained by the line; 1.0 is a perfect fit.",
    "rse": "Residual standard error = sqrt(RSS / (n-2)). Typical distance of a point from the line.",
    "f_statistic": "(TSS - RSS) / (RSS / (n-2)). Large values mean the line beats a flat mean model.",
    "seconds": "Wall-clock time of the fit + metrics step, measured without tracemalloc.",
    "peak_bytes": "Peak Python allocation during the fit + metrics step (tracemalloc).",
}
