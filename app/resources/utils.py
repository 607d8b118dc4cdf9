from .schemas import HealthResource
from typing import List, Optional

HEALTH_RESOURCES: List[HealthResource] = [
    HealthResource(
        title="World Health Organization (WHO)",
        description="Global public health information, research, and data from the United Nations' specialized agency.",
        link="https://www.who.int"
    ),
    HealthResource(
        title="Mayo Clinic",
        description="Comprehensive guides on diseases, conditions, symptoms, tests, and procedures.",
        link="https://www.mayoclinic.org"
    ),
    HealthResource(
        title="MedlinePlus",
        description="Health information from the U.S. National Library of Medicine, the world's largest medical library.",
        link="https://medlineplus.gov"
    ),
    HealthResource(
        title="Centers for Disease Control and Prevention (CDC)",
        description="U.S. public health information on diseases, conditions, and wellness.",
        link="https://www.cdc.gov"
    ),
    HealthResource(
        title="NHS (National Health Service)",
        description="The UK's largest health website, providing comprehensive information on conditions and treatments.",
        link="https://www.nhs.uk"
    ),
    HealthResource(
        title="WebMD",
        description="A popular source for medical news, information, and wellness support.",
        link="https://www.webmd.com"
    ),
]


def list_health_resources() -> List[HealthResource]:
    return list(HEALTH_RESOURCES)


def find_resource_link(title_prefix: str) -> Optional[str]:
    """Link of the first resource whose title starts with title_prefix."""
    for resource in HEALTH_RESOURCES:
        if resource.title.lower().startswith(title_prefix.lower()):
            return resource.link
    return None
