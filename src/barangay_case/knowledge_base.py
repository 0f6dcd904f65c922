"""Static legal knowledge base keyed by case category.

Each category maps to one LegalRecord describing the nature of the case, the
provisions the respondent may have violated, related jurisprudence and the
counter-charges a respondent could raise. The table is built once at import
and never mutated; ``lookup`` is total over CaseCategory.

Citation markers (【...】) are kept as they appear in the research notes the
table was compiled from.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple

from pydantic import BaseModel, ConfigDict

from barangay_case.categories import CaseCategory


class Provision(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    basis: str
    text: str
    penalty: str


class CaseCitation(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    summary: str


class LegalRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    nature: str
    description: str
    violations: Tuple[Provision, ...] = ()
    jurisprudence: Tuple[CaseCitation, ...] = ()
    counters: Tuple[Provision, ...] = ()


_ORAL_DEFAMATION_PENALTY_SOURCE = '【302115606301760†L4784-L4793】'

_LEGAL_DATA: Dict[CaseCategory, LegalRecord] = {
    CaseCategory.THEFT: LegalRecord(
        nature='Theft / Qualified Theft',
        description=(
            'Theft involves taking personal property belonging to another without their consent and with '
            'intent to gain. Qualified theft occurs when the offender and owner have a relationship of trust '
            '(e.g., employee and employer).'
        ),
        violations=(
            Provision(
                title='Theft',
                basis='Revised Penal Code Art. 308',
                text=(
                    'Article 308 defines theft as taking personal property belonging to another without violence '
                    'or intimidation, including the misappropriation of found property and the concealment of '
                    'lost goods. The offender must intend to gain from the property【302115606301760†L4077-L4134】.'
                ),
                penalty=(
                    'Article 309 provides penalties depending on the value of the property: if the value does not '
                    'exceed ₱5,000, arresto mayor or fine applies; between ₱5,000 and ₱12,000, arresto mayor to '
                    'prision correccional; ₱12,000 to ₱50,000, prision correccional; above ₱50,000, prision'
                    ' mayor【302115606301760†L4077-L4134】.'
                ),
            ),
            Provision(
                title='City ordinance on employment of seniors and PWDs',
                basis='San Pedro City Ordinance No. 2024‑13',
                text=(
                    'This ordinance mandates private businesses to reserve at least one job out of ten for senior '
                    'citizens and persons with disabilities (PWDs) and requires city offices to allocate at least '
                    '1% of positions to them【50922767766975†L25-L57】.'
                ),
                penalty=(
                    'Non‑compliance or misrepresentation results in a fine of ₱5,000 or imprisonment up to one '
                    'year【50922767766975†L25-L57】.'
                ),
            ),
        ),
        jurisprudence=(
            CaseCitation(
                title='Sonia Balagtas v. People (G.R. No. 257483, 30 Oct 2024)',
                summary=(
                    'The Supreme Court held that, to convict for qualified theft, the prosecution must prove a '
                    'relationship of confidence between the accused and the offended party. In this case, a '
                    'payroll manager who padded salaries and pocketed the difference was convicted of qualified '
                    'theft【267612455535893†L72-L76】【267612455535893†L87-L96】.'
                ),
            ),
        ),
        counters=(
            Provision(
                title='Malicious mischief',
                basis='Revised Penal Code Art. 327',
                text=(
                    'If property was merely damaged without intent to gain, the proper charge may be malicious '
                    'mischief rather than theft.'
                ),
                penalty='Penalties vary depending on the amount of damage (fine or imprisonment).',
            ),
            Provision(
                title='False accusation / Oral defamation',
                basis='Revised Penal Code Art. 358',
                text=(
                    'A respondent may file a counter‑charge for oral defamation if the complainant made false or '
                    'malicious allegations.'
                ),
                penalty=(
                    'Serious oral defamation is punishable by arresto mayor to prision correccional; slight '
                    'defamation carries arresto menor or a fine' + _ORAL_DEFAMATION_PENALTY_SOURCE + '.'
                ),
            ),
        ),
    ),
    CaseCategory.THREAT: LegalRecord(
        nature='Grave Threats / Threatening Behaviour',
        description=(
            'Threats involve threatening another with the infliction of any wrong amounting to a crime. Grave '
            'threats are punished based on conditions set and whether the threat is fulfilled.'
        ),
        violations=(
            Provision(
                title='Grave threats',
                basis='Revised Penal Code Art. 282',
                text=(
                    'Article 282 punishes any person who threatens another with the infliction of a wrong '
                    'amounting to a crime. The penalty varies depending on whether a demand or condition is '
                    'imposed and whether the threat is communicated in writing or through a '
                    'middleman【467119748815266†L161-L178】.'
                ),
                penalty=(
                    'If the threat includes a demand and the offender attains the objective, the penalty is one '
                    'degree lower than that prescribed for the threatened crime. If the objective is not attained, '
                    'two degrees lower; if there is no demand or condition, the penalty is arresto mayor and a fine '
                    'up to ₱100,000【467119748815266†L161-L178】.'
                ),
            ),
        ),
        jurisprudence=(
            CaseCitation(
                title='Paera v. People (G.R. No. 181626)',
                summary=(
                    'The Court upheld the conviction of a barangay chairman who brandished a bolo and threatened '
                    'his neighbours by shouting “I will kill you,” ruling that his actions constituted grave '
                    'threats【701912971857914†L75-L110】.'
                ),
            ),
        ),
        counters=(
            Provision(
                title='Provocation and self‑defense',
                basis='General defence',
                text=(
                    'Respondents may argue that any threatening statement was provoked or uttered in self‑defense. '
                    'The presence of mitigating circumstances can reduce criminal liability.'
                ),
                penalty='Penalties may be lowered if mitigating circumstances are established.',
            ),
            Provision(
                title='False accusation / Oral defamation',
                basis='Revised Penal Code Art. 358',
                text=(
                    'The respondent may counter‑charge for libel or oral defamation if the complainant exaggerated '
                    'or fabricated the alleged threats.'
                ),
                penalty=(
                    'Serious oral defamation is punishable by arresto mayor to prision correccional; slight '
                    'defamation by arresto menor or fine' + _ORAL_DEFAMATION_PENALTY_SOURCE + '.'
                ),
            ),
        ),
    ),
    CaseCategory.DEFAMATION: LegalRecord(
        nature='Oral Defamation (Slander)',
        description=(
            'Oral defamation or slander consists in speaking ill of another, imputing a vice, defect or act which '
            'tends to cause dishonour, discredit or contempt.'
        ),
        violations=(
            Provision(
                title='Oral defamation',
                basis='Revised Penal Code Art. 358',
                text=(
                    'Article 358 punishes oral defamation: serious defamation is committed when imputations are '
                    'serious, while slight defamation covers minor insults. The provision prescribes the applicable '
                    'penalties' + _ORAL_DEFAMATION_PENALTY_SOURCE + '.'
                ),
                penalty=(
                    'Serious oral defamation: arresto mayor to prision correccional; slight defamation: arresto'
                    ' menor or a fine not exceeding ₱200' + _ORAL_DEFAMATION_PENALTY_SOURCE + '.'
                ),
            ),
        ),
        jurisprudence=(
            CaseCitation(
                title='Balite v. People (G.R. L‑21475, 30 Sept 1966)',
                summary=(
                    'The Supreme Court convicted a union president of grave oral defamation after he publicly '
                    'accused another of misappropriating strike funds; the Court imposed arresto mayor and prision'
                    ' correccional【363720073413201†L79-L87】【363720073413201†L117-L124】.'
                ),
            ),
        ),
        counters=(
            Provision(
                title='Truth and privileged communications',
                basis='Revised Penal Code Arts. 354 & 361',
                text=(
                    'Statements made in the performance of a lawful duty or in privileged occasions (e.g., judicial '
                    'proceedings) are not actionable if true and made in good faith.'
                ),
                penalty='No criminal liability if privilege is established.',
            ),
            Provision(
                title='Counter‑libel against complainant',
                basis='Revised Penal Code Art. 358',
                text=(
                    'If the complainant publicly utters false accusations or defamatory statements during the case, '
                    'the respondent may file a libel or defamation case.'
                ),
                penalty=(
                    'Serious oral defamation: arresto mayor to prision correccional; slight defamation: arresto'
                    ' menor or fine' + _ORAL_DEFAMATION_PENALTY_SOURCE + '.'
                ),
            ),
        ),
    ),
    CaseCategory.INJURY: LegalRecord(
        nature='Physical Injuries',
        description=(
            'Physical injuries offences punish acts inflicting bodily harm. Slight physical injuries cover cases '
            'where incapacity or medical attendance does not exceed nine days.'
        ),
        violations=(
            Provision(
                title='Slight physical injuries',
                basis='Revised Penal Code Art. 266',
                text=(
                    'Article 266 penalises slight physical injuries and maltreatment. When the offended party is '
                    'incapacitated for labour or needs medical attendance from one to nine days, the penalty is '
                    'arresto menor; if the injuries do not prevent work, a fine not exceeding ₱500 is '
                    'imposed【302115606301760†L3534-L3546】.'
                ),
                penalty='Arresto menor (1–30 days) or fine up to ₱500【302115606301760†L3534-L3546】.',
            ),
        ),
        jurisprudence=(),
        counters=(
            Provision(
                title='Self‑defense',
                basis='General defence',
                text=(
                    'Respondent may assert that any injuries were inflicted in lawful self‑defense or defense of a '
                    'relative, which can justify the act.'
                ),
                penalty='No criminal liability if all elements of self‑defense are present.',
            ),
            Provision(
                title='Mutual affray',
                basis='Revised Penal Code Art. 251',
                text=(
                    'If both parties voluntarily engaged in a fight, each may be liable only for lesser offences '
                    'depending on the injuries inflicted.'
                ),
                penalty='Penalties vary by resulting injuries and participation.',
            ),
        ),
    ),
    CaseCategory.GENERAL: LegalRecord(
        nature='General Complaint / Other Offence',
        description=(
            'The facts provided do not clearly correspond to a single criminal classification. Barangay officials '
            'should evaluate all facts and identify applicable laws.'
        ),
        violations=(
            Provision(
                title='Barangay justice system',
                basis='Local Government Code & Katarungang Pambarangay Rules',
                text=(
                    'Most disputes between residents of the same barangay must be referred to the Lupong '
                    'Tagapamayapa for amicable settlement before they can be filed in court. Exceptions include '
                    'offences punishable by more than one year’s imprisonment or a fine exceeding ₱5,000.'
                ),
                penalty='If mediation fails, the complaint may proceed to the courts.',
            ),
            Provision(
                title='Relevant local ordinances',
                basis='San Pedro City ordinances',
                text=(
                    'San Pedro City enacts ordinances on matters such as noise control, curfew, sanitation, '
                    'environmental protection and employment. Depending on the complaint, specific ordinances may '
                    'apply.'
                ),
                penalty='Penalties vary by ordinance.',
            ),
        ),
        jurisprudence=(),
        counters=(),
    ),
}

LEGAL_DATA: Mapping[CaseCategory, LegalRecord] = MappingProxyType(_LEGAL_DATA)


def lookup(category: CaseCategory) -> LegalRecord:
    return LEGAL_DATA[category]


def categories() -> List[Dict[str, Any]]:
    """List categories with their case nature, in enum order."""
    return [{"id": c.value, "nature": LEGAL_DATA[c].nature} for c in CaseCategory]


def knowledge_base_metadata() -> Dict[str, Any]:
    return {
        'num_categories': len(LEGAL_DATA),
        'categories': {
            c.value: {
                'violations': len(rec.violations),
                'jurisprudence': len(rec.jurisprudence),
                'counters': len(rec.counters),
            }
            for c, rec in LEGAL_DATA.items()
        },
    }
