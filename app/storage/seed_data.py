# app/storage/seed_data.py
"""
Fixture data loaded into an empty store at startup.

Diseases and symptoms refer to body systems by position (1-based), which lines
up with the ids the store hands out when it starts empty.
"""
import logging
from datetime import datetime, timezone

from app.medical_models.article_model.article_schemas import ArticleCreate
from app.medical_models.body_system_model.body_system_schemas import BodySystemCreate
from app.medical_models.disease_model.disease_schemas import DiseaseCreate
from app.medical_models.resource_model.resource_schemas import ResourceCreate
from app.medical_models.symptom_model.symptom_schemas import SymptomCreate

logger = logging.getLogger(__name__)

_IMG = "https://images.unsplash.com/photo-{}?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&h=450"

# Body system ids used below
CARDIOVASCULAR, RESPIRATORY, DIGESTIVE, NERVOUS, ENDOCRINE = 1, 2, 3, 4, 5


BODY_SYSTEMS = [
    BodySystemCreate(
        name="Cardiovascular System",
        description="The heart, blood vessels and blood. Carries oxygen, nutrients and hormones to cells throughout the body.",
        image_url=_IMG.format("1628595351029-c2bf17511435"),
    ),
    BodySystemCreate(
        name="Respiratory System",
        description="The lungs and airways. Brings oxygen into the body and removes carbon dioxide through gas exchange.",
        image_url="https://images.pexels.com/photos/5938242/pexels-photo-5938242.jpeg?auto=compress&cs=tinysrgb&w=800&h=450",
    ),
    BodySystemCreate(
        name="Digestive System",
        description="Mouth, esophagus, stomach, intestines and accessory organs that turn food into nutrients the body can use.",
        image_url=_IMG.format("1606206591513-adbfbdd7a177"),
    ),
    BodySystemCreate(
        name="Nervous System",
        description="Brain, spinal cord and nerves. Controls voluntary and involuntary actions and carries signals around the body.",
        image_url=_IMG.format("1559757175-5700dde675bc"),
    ),
    BodySystemCreate(
        name="Endocrine System",
        description="Hormone-producing glands that regulate metabolism, growth, development, tissue function and mood.",
        image_url=_IMG.format("1582560475093-ba66accbc953"),
    ),
]


DISEASES = [
    DiseaseCreate(
        name="Coronary Artery Disease",
        body_system_id=CARDIOVASCULAR,
        description="Damage or disease in the major blood vessels that supply the heart, usually caused by cholesterol-containing plaque and inflammation.",
        causes="Plaque buildup (atherosclerosis) narrows the coronary arteries. Risk factors include high blood pressure, high cholesterol, smoking, diabetes and family history.",
        symptoms="Chest pain (angina), shortness of breath and heart attack. Some people have no symptoms until a significant blockage develops.",
        treatments="Lifestyle changes, medications (statins, beta blockers, aspirin) and procedures such as angioplasty, stent placement or bypass surgery.",
        prevention="Keep a healthy weight, exercise regularly, avoid smoking, control blood pressure and cholesterol, manage stress.",
        image_url=_IMG.format("1584515979956-d9f6e5d09982"),
    ),
    DiseaseCreate(
        name="Asthma",
        body_system_id=RESPIRATORY,
        description="Airways narrow, swell and may produce extra mucus, making breathing difficult and triggering coughing and wheezing.",
        causes="A mix of genetic and environmental factors. Triggers include airborne allergens, respiratory infections, cold air, exertion and stress.",
        symptoms="Shortness of breath, chest tightness, wheezing when exhaling, trouble sleeping and coughing attacks.",
        treatments="Inhaled corticosteroids, leukotriene modifiers and long-acting beta agonists for control; short-acting beta agonists for quick relief.",
        prevention="Avoid known triggers, stay vaccinated against influenza and pneumonia, follow an asthma action plan.",
        image_url=_IMG.format("1628771065518-0d82f1938462"),
    ),
    DiseaseCreate(
        name="Alzheimer's Disease",
        body_system_id=NERVOUS,
        description="A progressive neurologic disorder in which the brain shrinks and brain cells die. The most common cause of dementia.",
        causes="Most cases come from a combination of genetic, lifestyle and environmental factors. Under 1% are caused by specific genetic changes.",
        symptoms="Forgetting recent events or conversations early on, progressing to severe memory impairment and loss of everyday function.",
        treatments="No cure. Cholinesterase inhibitors and memantine can temporarily slow symptoms; support programs help patients and caregivers.",
        prevention="Regular exercise, social engagement, a heart-healthy diet and mental stimulation may reduce risk.",
        image_url=_IMG.format("1576671414121-aa0c79a0c69a"),
    ),
    DiseaseCreate(
        name="Type 2 Diabetes",
        body_system_id=ENDOCRINE,
        description="A chronic condition affecting how the body metabolizes glucose: cells resist insulin or the pancreas does not produce enough of it.",
        causes="Excess weight and physical inactivity, with genetic factors and family history. Insulin resistance is the key mechanism.",
        symptoms="Increased thirst, frequent urination, hunger, fatigue, blurred vision, slow-healing sores and frequent infections.",
        treatments="Healthy eating, exercise, blood sugar monitoring, and when needed diabetes medications or insulin therapy.",
        prevention="Maintain a healthy weight, stay physically active and eat a balanced diet.",
        image_url=_IMG.format("1593476087123-36d1de271f08"),
    ),
    DiseaseCreate(
        name="Irritable Bowel Syndrome (IBS)",
        body_system_id=DIGESTIVE,
        description="A common disorder of the large intestine with cramping, abdominal pain, bloating, gas, and diarrhea or constipation.",
        causes="Unknown; intestinal muscle contractions, nervous system abnormalities, inflammation, severe infection and gut microflora changes play a role.",
        symptoms="Abdominal pain, cramping, bloating, gas, diarrhea or constipation, and mucus in the stool.",
        treatments="Dietary changes, symptom-specific medications (antispasmodics, antidepressants, antibiotics), stress reduction and probiotics.",
        prevention="Symptoms are managed by avoiding trigger foods, managing stress, regular exercise and adequate sleep.",
        image_url=_IMG.format("1565071559227-20ab25b7685e"),
    ),
]


SYMPTOMS = [
    SymptomCreate(name="Chest pain", body_system_id=CARDIOVASCULAR, description="Pressure, burning, tightness or sharp pain in the chest."),
    SymptomCreate(name="Shortness of breath", body_system_id=RESPIRATORY, description="Difficulty breathing or feeling unable to get enough air."),
    SymptomCreate(name="Fatigue", description="Extreme tiredness that does not improve with rest."),
    SymptomCreate(name="Headache", body_system_id=NERVOUS, description="Pain in any region of the head."),
    SymptomCreate(name="Dizziness", body_system_id=NERVOUS, description="Feeling faint, woozy or unsteady."),
    SymptomCreate(name="Nausea", body_system_id=DIGESTIVE, description="Sickness with an inclination to vomit."),
    SymptomCreate(name="Abdominal pain", body_system_id=DIGESTIVE, description="Pain felt between the chest and groin."),
    SymptomCreate(name="Fever", description="Body temperature above 37°C (98.6°F)."),
    SymptomCreate(name="Cough", body_system_id=RESPIRATORY, description="Sudden expulsion of air from the lungs to clear the airways."),
    SymptomCreate(name="Wheezing", body_system_id=RESPIRATORY, description="High-pitched whistling while breathing, often from narrowed airways."),
    SymptomCreate(name="Joint pain", description="Aches or soreness in any of the body's joints."),
    SymptomCreate(name="Muscle weakness", description="Reduced strength in one or more muscles."),
    SymptomCreate(name="Memory problems", body_system_id=NERVOUS, description="Difficulty recalling information or events."),
    SymptomCreate(name="Blurred vision", body_system_id=NERVOUS, description="Objects appear out of focus."),
    SymptomCreate(name="Increased thirst", body_system_id=ENDOCRINE, description="Abnormal need to drink fluids."),
    SymptomCreate(name="Frequent urination", body_system_id=ENDOCRINE, description="Needing to urinate more often than usual."),
    SymptomCreate(name="Weight loss (unexplained)", description="Losing weight without changes to diet, exercise or lifestyle."),
    SymptomCreate(name="Rash", description="Irritated or swollen skin that can be itchy, red, painful or warm."),
    SymptomCreate(name="Swelling", description="Enlargement of a body part from fluid retention or other causes."),
    SymptomCreate(name="Heart palpitations", body_system_id=CARDIOVASCULAR, description="A pounding, racing or fluttering heartbeat."),
]


def _published(day: str) -> datetime:
    return datetime.fromisoformat(day).replace(tzinfo=timezone.utc)


ARTICLES = [
    ArticleCreate(
        title="Breakthrough in Alzheimer's Treatment Shows Promise in Clinical Trials",
        content=(
            "A new drug targeting amyloid plaques produced significant cognitive improvement in early-stage "
            "Alzheimer's patients during Phase 3 trials. Patients receiving the treatment showed 27% less "
            "cognitive decline over 18 months than those on placebo, across more than 1,700 participants in "
            "22 countries. The treatment is now under regulatory review."
        ),
        summary="Researchers report significant cognitive improvements in early-stage patients using a novel targeted therapy.",
        image_url=_IMG.format("1581093450021-a7a0e6e7e35f"),
        category="Neurology",
        source="Journal of Neurology",
        published_at=_published("2023-05-15"),
    ),
    ArticleCreate(
        title="AI-Powered Diagnostic Tool Achieves 94% Accuracy in Cancer Detection",
        content=(
            "A deep learning system trained on over 100,000 anonymized medical images identified malignancies "
            "with 94% accuracy across lung, breast and colorectal cancers. In a validation study with 53 "
            "radiologists, AI-supported reads cut false negatives by 22%."
        ),
        summary="A machine learning algorithm shows exceptional performance identifying early-stage tumors from imaging.",
        image_url=_IMG.format("1584036561566-baf8f5f1b144"),
        category="Technology",
        source="Digital Medicine Today",
        published_at=_published("2023-05-10"),
    ),
    ArticleCreate(
        title="Large-Scale Study Identifies New Genetic Markers for Heart Disease Risk",
        content=(
            "Genetic data from over 1.4 million people revealed 58 previously unknown variants associated with "
            "cardiovascular disease. Several affect inflammatory pathways not previously linked to heart "
            "health, opening new avenues for risk prediction and therapy."
        ),
        summary="An international consortium discovers genetic variants associated with increased cardiovascular risk.",
        image_url=_IMG.format("1576091160550-2173dba999ef"),
        category="Cardiology",
        source="Cardiology Research",
        published_at=_published("2023-05-05"),
    ),
    ArticleCreate(
        title="New Vaccine Technology Offers Hope for Preventing Future Pandemics",
        content=(
            "A self-amplifying RNA platform generated strong immune responses against multiple test viruses in "
            "preclinical studies and could produce candidate vaccines within weeks of identifying a new "
            "pathogen. Trials for influenza and dengue vaccines on the platform are underway."
        ),
        summary="A versatile platform for rapid vaccine creation could shorten response time to novel pathogens.",
        image_url=_IMG.format("1584483766114-2cea6facdf57"),
        category="Immunology",
        source="Vaccine Research Journal",
        published_at=_published("2023-04-28"),
    ),
    ArticleCreate(
        title="Innovative Non-Invasive Treatment for Chronic Pain Shows Promising Results",
        content=(
            "Focused ultrasound that temporarily deactivates specific nerve pathways gave 73% of 248 "
            "treatment-resistant chronic pain patients at least a 50% reduction in pain after four weeks, "
            "without the risks of opioids or surgery."
        ),
        summary="Trials show significant pain reduction in long-term conditions using targeted ultrasound therapy.",
        image_url=_IMG.format("1631815588090-d1bcbe9b4c25"),
        category="Pain Management",
        source="Journal of Pain Medicine",
        published_at=_published("2023-04-20"),
    ),
    ArticleCreate(
        title="Gut Microbiome Linked to Mental Health in Groundbreaking Research",
        content=(
            "An analysis of gut bacteria and mental health data from more than 10,000 participants found "
            "bacterial signatures associated with depression, anxiety and bipolar disorder, consistent across "
            "countries, diets and genetic backgrounds. Probiotic intervention trials are being planned."
        ),
        summary="Scientists connect gut bacteria composition with several psychiatric conditions in a large study.",
        image_url=_IMG.format("1532187863486-abf9dbad1b69"),
        category="Mental Health",
        source="Microbiome Research",
        published_at=_published("2023-04-15"),
    ),
]


RESOURCES = [
    ResourceCreate(
        title="NEJM (New England Journal of Medicine)",
        description="Leading medical journal featuring the latest medical research and reviews.",
        url="https://www.nejm.org/",
        type="journal",
        category="professional",
    ),
    ResourceCreate(
        title="UpToDate",
        description="Evidence-based clinical decision support with thousands of topics for medical professionals.",
        url="https://www.uptodate.com/",
        type="reference",
        category="professional",
    ),
    ResourceCreate(
        title="MedlinePlus",
        description="The National Institutes of Health's site for patients with reliable, up-to-date health information.",
        url="https://medlineplus.gov/",
        type="website",
        category="patient",
    ),
    ResourceCreate(
        title="CDC (Centers for Disease Control and Prevention)",
        description="Health information and resources on diseases, conditions and public health topics.",
        url="https://www.cdc.gov/",
        type="organization",
        category="patient",
    ),
    ResourceCreate(
        title="Mayo Clinic",
        description="Academic medical center integrating clinical practice, education and research.",
        url="https://www.mayoclinic.org/",
        type="hospital",
        category="hospital",
        location="Rochester, MN (main campus)",
    ),
    ResourceCreate(
        title="Cleveland Clinic",
        description="Nonprofit multispecialty academic medical center combining hospital care with research and education.",
        url="https://my.clevelandclinic.org/",
        type="hospital",
        category="hospital",
        location="Cleveland, OH",
    ),
]


async def seed_repository(repository) -> None:
    """Insert every fixture through the repository's own create operations."""
    for body_system in BODY_SYSTEMS:
        await repository.create_body_system(body_system)
    for disease in DISEASES:
        await repository.create_disease(disease)
    for symptom in SYMPTOMS:
        await repository.create_symptom(symptom)
    for article in ARTICLES:
        await repository.create_article(article)
    for resource in RESOURCES:
        await repository.create_resource(resource)

    logger.info(
        f"🌱 Seeded {len(BODY_SYSTEMS)} body systems, {len(DISEASES)} diseases, "
        f"{len(SYMPTOMS)} symptoms, {len(ARTICLES)} articles, {len(RESOURCES)} resources"
    )
