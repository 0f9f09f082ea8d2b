from __future__ import annotations

from dataclasses import dataclass

US_STATES = (
    "Alabama", "Alaska", "Arizona", "Arkansas", "California", "Colorado", "Connecticut", "Delaware",
    "District of Columbia", "Florida", "Georgia", "Hawaii", "Idaho", "Illinois", "Indiana", "Iowa",
    "Kansas", "Kentucky", "Louisiana", "Maine", "Maryland", "Massachusetts", "Michigan", "Minnesota",
    "Mississippi", "Missouri", "Montana", "Nebraska", "Nevada", "New Hampshire", "New Jersey",
    "New Mexico", "New York", "North Carolina", "North Dakota", "Ohio", "Oklahoma", "Oregon",
    "Pennsylvania", "Rhode Island", "South Carolina", "South Dakota", "Tennessee", "Texas", "Utah",
    "Vermont", "Virginia", "Washington", "West Virginia", "Wisconsin", "Wyoming",
)

_US_CITIES = {
    "Arizona": ("Phoenix", "Tucson", "Scottsdale"),
    "California": ("Los Angeles", "San Francisco", "San Diego", "San Jose", "Sacramento", "Irvine"),
    "Colorado": ("Denver", "Boulder"),
    "Connecticut": ("Hartford", "Stamford", "New Haven"),
    "District of Columbia": ("Washington",),
    "Florida": ("Miami", "Tampa", "Orlando", "Jacksonville", "Fort Lauderdale"),
    "Georgia": ("Atlanta", "Savannah"),
    "Illinois": ("Chicago", "Springfield"),
    "Maryland": ("Baltimore", "Bethesda"),
    "Massachusetts": ("Boston", "Cambridge"),
    "Michigan": ("Detroit", "Ann Arbor", "Grand Rapids"),
    "Minnesota": ("Minneapolis", "Saint Paul"),
    "Missouri": ("St. Louis", "Kansas City"),
    "Nevada": ("Las Vegas", "Reno"),
    "New Jersey": ("Newark", "Jersey City", "Princeton"),
    "New York": ("New York City", "Brooklyn", "Albany", "Buffalo", "Rochester"),
    "North Carolina": ("Charlotte", "Raleigh", "Durham"),
    "Ohio": ("Columbus", "Cleveland", "Cincinnati"),
    "Oregon": ("Portland", "Salem"),
    "Pennsylvania": ("Philadelphia", "Pittsburgh", "Harrisburg"),
    "Tennessee": ("Nashville", "Memphis"),
    "Texas": ("Houston", "Dallas", "Austin", "San Antonio", "Fort Worth"),
    "Utah": ("Salt Lake City",),
    "Virginia": ("Richmond", "Arlington", "Alexandria"),
    "Washington": ("Seattle", "Spokane", "Bellevue"),
    "Wisconsin": ("Milwaukee", "Madison"),
}

REGION_CATALOG: dict[str, dict[str, tuple[str, ...]]] = {
    "United States": {state: _US_CITIES.get(state, ()) for state in US_STATES},
    "Canada": {
        "Alberta": ("Calgary", "Edmonton"),
        "British Columbia": ("Vancouver", "Victoria"),
        "Manitoba": ("Winnipeg",),
        "Nova Scotia": ("Halifax",),
        "Ontario": ("Toronto", "Ottawa", "Mississauga", "Hamilton"),
        "Quebec": ("Montreal", "Quebec City"),
        "Saskatchewan": ("Regina", "Saskatoon"),
    },
    "United Kingdom": {
        "England": ("London", "Manchester", "Birmingham", "Leeds", "Bristol"),
        "Scotland": ("Edinburgh", "Glasgow", "Aberdeen"),
        "Wales": ("Cardiff", "Swansea"),
        "Northern Ireland": ("Belfast",),
    },
}

MINIMAL_LOCATIONS = ("Remote", "New York", "California", "Texas", "Illinois", "Florida")

MINIMAL_CATEGORIES = ("Lawyer", "Counsel", "Litigation", "Compliance", "Intellectual Property")

JOB_TYPE_OPTIONS = (
    ("full-time", "Full Time"),
    ("part-time", "Part Time"),
    ("contract", "Contract"),
    ("part time contract", "Part Time Contract"),
)


@dataclass(frozen=True)
class LocationSelection:
    country: str = ""
    region: str = ""
    city: str = ""

    def is_empty(self) -> bool:
        return not (self.country or self.region or self.city)

    def resolve(self) -> LocationSelection:
        """Drop any level that does not belong to the level above it.

        Changing the country resets region and city; changing the region
        resets the city.
        """
        regions = REGION_CATALOG.get(self.country)
        if regions is None:
            return LocationSelection()
        cities = regions.get(self.region)
        if cities is None:
            return LocationSelection(country=self.country)
        if self.city and self.city not in cities:
            return LocationSelection(country=self.country, region=self.region)
        return self

    def candidate_names(self) -> list[str]:
        """Names whose presence in a location string satisfies this selection."""
        if self.city:
            return [self.city]
        if self.region:
            return [self.region, *REGION_CATALOG.get(self.country, {}).get(self.region, ())]
        if self.country:
            names = [self.country]
            for region, cities in REGION_CATALOG.get(self.country, {}).items():
                names.append(region)
                names.extend(cities)
            return names
        return []


def regions_for(country: str) -> list[str]:
    return list(REGION_CATALOG.get(country, {}))


def cities_for(country: str, region: str) -> list[str]:
    return list(REGION_CATALOG.get(country, {}).get(region, ()))
