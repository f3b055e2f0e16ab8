import math


def wind_chill(temp_f: float, wind_mph: float) -> float:
    # formula only holds at or below 40F with at least 5 mph of wind
    if temp_f > 40 or wind_mph < 5:
        return temp_f
    wind_exp = math.pow(wind_mph, 0.16)
    return 35.74 + (0.6215 * temp_f) - (35.75 * wind_exp) + (0.4275 * temp_f * wind_exp)


# following equation from https://www.wpc.ncep.noaa.gov/html/heatindex_equation.shtml
def heat_index(temp_f: float, rh: float) -> float:
    if temp_f < 80:
        return temp_f
    simple_hi = 0.5 * (temp_f + 61 + ((temp_f - 68) * 1.2) + (rh * 0.094))
    if simple_hi < 80:
        return simple_hi

    hi = (
        -42.379
        + 2.04901523 * temp_f
        + 10.14333127 * rh
        - 0.22475541 * temp_f * rh
        - 0.00683783 * temp_f * temp_f
        - 0.05481717 * rh * rh
        + 0.00122874 * temp_f * temp_f * rh
        + 0.00085282 * temp_f * rh * rh
        - 0.00000199 * temp_f * temp_f * rh * rh
    )
    if rh < 13 and 80 <= temp_f <= 112:
        hi -= ((13 - rh) / 4) * math.sqrt((17 - abs(temp_f - 95)) / 17)
    elif rh > 85 and 80 <= temp_f <= 87:
        hi += ((rh - 85) / 10) * ((87 - temp_f) / 5)
    return hi


def dew_point(temp_f: float, rh: float) -> float:
    """Magnus approximation, returned in fahrenheit."""
    if rh <= 0:
        return math.nan
    a = 17.625
    b = 243.04
    t = (temp_f - 32) * 5 / 9
    alpha = math.log(rh / 100) + ((a * t) / (b + t))
    return (b * alpha / (a - alpha) * 9 / 5) + 32
