COUNTRIES = {
    # Structure: alpha3: {"name": "Country Name", "nationality": "Nationality", "alpha2": "XX"}
    "SWZ": {"name": "Eswatini", "nationality": "Swazi", "alpha2": "SZ"},
    "ZAF": {"name": "South Africa", "nationality": "South African", "alpha2": "ZA"},
}


def to_alpha3(country_code):
    """Normalize an alpha-2 or alpha-3 code to a known alpha-3 code, or None"""
    if not isinstance(country_code, str):
        return None
    country_code = country_code.strip().upper()

    if len(country_code) == 2:
        for code, data in COUNTRIES.items():
            if data["alpha2"] == country_code:
                return code
        return None
    if len(country_code) == 3 and country_code in COUNTRIES:
        return country_code
    return None


def get_country_info(country_code):
    """Get full country information by code (accepts both alpha-2 and alpha-3)"""
    alpha3 = to_alpha3(country_code)
    if alpha3 is None:
        return {"error": f"Country code not supported: {country_code}"}

    data = COUNTRIES[alpha3]
    return {
        "alpha2": data["alpha2"],
        "alpha3": alpha3,
        "name": data["name"],
        "nationality": data["nationality"],
        "status": "valid"
    }
