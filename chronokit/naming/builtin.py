"""Builtin name data for a handful of locales.

Russian and Polish carry distinct standalone (nominative) and in-phrase
(genitive) month names; the other locales only define the in-phrase forms
and rely on the resolver pairing standalone requests with them. No locale
ships narrow data here; narrow requests end in the single-letter table.
"""
from __future__ import annotations

from chronokit.core.enums import TextStyle

from .tables import DAY_OF_WEEK, MONTH, StaticNameTable

FULL = TextStyle.FULL
FULL_STANDALONE = TextStyle.FULL_STANDALONE
SHORT = TextStyle.SHORT
SHORT_STANDALONE = TextStyle.SHORT_STANDALONE

BUILTIN_DATA = {
    "en": {
        MONTH: {
            FULL: "January February March April May June July August September October November December".split(),
            SHORT: "Jan Feb Mar Apr May Jun Jul Aug Sep Oct Nov Dec".split(),
        },
        DAY_OF_WEEK: {
            FULL: "Monday Tuesday Wednesday Thursday Friday Saturday Sunday".split(),
            SHORT: "Mon Tue Wed Thu Fri Sat Sun".split(),
        },
    },
    "de": {
        MONTH: {
            FULL: "Januar Februar März April Mai Juni Juli August September Oktober November Dezember".split(),
            SHORT: "Jan. Feb. März Apr. Mai Juni Juli Aug. Sept. Okt. Nov. Dez.".split(),
            SHORT_STANDALONE: "Jan Feb Mär Apr Mai Jun Jul Aug Sep Okt Nov Dez".split(),
        },
        DAY_OF_WEEK: {
            FULL: "Montag Dienstag Mittwoch Donnerstag Freitag Samstag Sonntag".split(),
            SHORT: "Mo. Di. Mi. Do. Fr. Sa. So.".split(),
            SHORT_STANDALONE: "Mo Di Mi Do Fr Sa So".split(),
        },
    },
    "fr": {
        MONTH: {
            FULL: "janvier février mars avril mai juin juillet août septembre octobre novembre décembre".split(),
            SHORT: "janv. févr. mars avr. mai juin juil. août sept. oct. nov. déc.".split(),
        },
        DAY_OF_WEEK: {
            FULL: "lundi mardi mercredi jeudi vendredi samedi dimanche".split(),
            SHORT: "lun. mar. mer. jeu. ven. sam. dim.".split(),
        },
    },
    "ru": {
        MONTH: {
            FULL: "января февраля марта апреля мая июня июля августа сентября октября ноября декабря".split(),
            FULL_STANDALONE: "январь февраль март апрель май июнь июль август сентябрь октябрь ноябрь декабрь".split(),
            SHORT: "янв. февр. мар. апр. мая июн. июл. авг. сент. окт. нояб. дек.".split(),
            SHORT_STANDALONE: "янв. февр. март апр. май июнь июль авг. сент. окт. нояб. дек.".split(),
        },
        DAY_OF_WEEK: {
            FULL: "понедельник вторник среда четверг пятница суббота воскресенье".split(),
            SHORT: "пн вт ср чт пт сб вс".split(),
        },
    },
    "pl": {
        MONTH: {
            FULL: "stycznia lutego marca kwietnia maja czerwca lipca sierpnia września października listopada grudnia".split(),
            FULL_STANDALONE: "styczeń luty marzec kwiecień maj czerwiec lipiec sierpień wrzesień październik listopad grudzień".split(),
            SHORT: "sty lut mar kwi maj cze lip sie wrz paź lis gru".split(),
        },
        DAY_OF_WEEK: {
            FULL: "poniedziałek wtorek środa czwartek piątek sobota niedziela".split(),
            SHORT: "pon. wt. śr. czw. pt. sob. niedz.".split(),
        },
    },
}

BUILTIN_NAMES = StaticNameTable(BUILTIN_DATA)
