"""
Reference data for the non-math subjects.

These catalogs are intentionally small: they cover the knowledge points that
show up most often in uploaded mistakes so that the normalizer and the
suggestion list know about them. Same ``(canonical name, aliases)`` layout as
the math table.
"""

ENGLISH_CURRICULUM_DATA = {
    "七年级上": [
        ("语法: 时态基础", [
            ("一般现在时", ("Simple Present", "Present Simple")),
            ("现在进行时", ("Present Continuous", "Present Progressive")),
        ]),
        ("语法: 词法", [
            ("名词复数", ("Plural Nouns",)),
            ("人称代词", ("代词", "Pronouns")),
            ("冠词", ("Articles",)),
            ("介词", ("Prepositions",)),
        ]),
    ],
    "七年级下": [
        ("语法: 时态进阶", [
            ("一般过去时", ("Simple Past", "Past Simple")),
            ("一般将来时", ("Simple Future", "be going to")),
        ]),
    ],
    "八年级上": [
        ("语法: 句法", [
            ("比较级和最高级", ("Comparatives", "形容词比较级")),
            ("现在完成时", ("Present Perfect",)),
            ("宾语从句", ("Object Clause",)),
        ]),
    ],
    "九年级上": [
        ("语法: 从句与语态", [
            ("被动语态", ("Passive Voice",)),
            ("定语从句", ("Attributive Clause",)),
        ]),
        ("题型", [
            ("完形填空", ("Cloze",)),
            ("阅读理解", ("Reading Comprehension",)),
            ("书面表达", ("作文", "Writing")),
        ]),
    ],
}

PHYSICS_CURRICULUM_DATA = {
    "八年级上": [
        ("第1章 机械运动", [
            ("长度和时间的测量", ("刻度尺",)),
            ("运动的快慢", ("速度", "平均速度")),
        ]),
        ("第2章 声现象", [
            ("声音的产生与传播", ("声音",)),
            ("声音的特性", ("音调", "响度", "音色")),
        ]),
        ("第3章 物态变化", [
            ("温度", ("温度计",)),
            ("熔化和凝固", ("熔化", "凝固")),
            ("汽化和液化", ("蒸发", "沸腾")),
        ]),
        ("第4章 光现象", [
            ("光的直线传播", ()),
            ("光的反射", ("反射定律",)),
            ("光的折射", ()),
        ]),
        ("第5章 透镜及其应用", [
            ("凸透镜成像规律", ("凸透镜成像",)),
        ]),
        ("第6章 质量与密度", [
            ("质量", ()),
            ("密度", ("密度的测量",)),
        ]),
    ],
    "八年级下": [
        ("第7章 力", [
            ("力", ("力的三要素",)),
            ("弹力", ("弹簧测力计",)),
            ("重力", ()),
        ]),
        ("第8章 运动和力", [
            ("牛顿第一定律", ("惯性",)),
            ("二力平衡", ()),
            ("摩擦力", ("滑动摩擦力",)),
        ]),
        ("第9章 压强", [
            ("压强", ("固体压强",)),
            ("液体的压强", ("液体压强",)),
            ("大气压强", ("大气压",)),
        ]),
        ("第10章 浮力", [
            ("浮力", ()),
            ("阿基米德原理", ()),
            ("物体的浮沉条件", ("浮沉条件",)),
        ]),
        ("第11章 功和机械能", [
            ("功", ()),
            ("功率", ()),
            ("动能和势能", ("动能", "势能")),
            ("机械能及其转化", ("机械能守恒",)),
        ]),
        ("第12章 简单机械", [
            ("杠杆", ("杠杆平衡条件",)),
            ("滑轮", ("滑轮组",)),
            ("机械效率", ()),
        ]),
    ],
    "九年级上": [
        ("第13章 内能", [
            ("分子热运动", ("扩散",)),
            ("内能", ()),
            ("比热容", ()),
        ]),
        ("第14章 内能的利用", [
            ("热机", ("内燃机",)),
            ("热机的效率", ("热值",)),
        ]),
        ("第15章 电流和电路", [
            ("电流和电路", ("电路",)),
            ("串联和并联", ("串联电路", "并联电路")),
        ]),
        ("第16章 电压 电阻", [
            ("电压", ()),
            ("电阻", ("影响电阻大小的因素",)),
            ("变阻器", ("滑动变阻器",)),
        ]),
        ("第17章 欧姆定律", [
            ("欧姆定律", ()),
            ("电阻的测量", ("伏安法测电阻",)),
        ]),
    ],
    "九年级下": [
        ("第18章 电功率", [
            ("电能 电功", ("电功", "电能表")),
            ("电功率", ()),
            ("焦耳定律", ("电热",)),
        ]),
        ("第20章 电与磁", [
            ("磁现象 磁场", ("磁场", "磁感线")),
            ("电磁感应", ("发电机",)),
            ("电动机", ()),
        ]),
    ],
}

CHEMISTRY_CURRICULUM_DATA = {
    "九年级上": [
        ("第1单元 走进化学世界", [
            ("物理变化和化学变化", ("物理变化", "化学变化")),
            ("化学实验基本操作", ("实验基本操作",)),
        ]),
        ("第2单元 我们周围的空气", [
            ("空气的成分", ("空气",)),
            ("氧气的性质", ("氧气",)),
            ("氧气的制取", ("实验室制氧气",)),
        ]),
        ("第3单元 物质构成的奥秘", [
            ("分子和原子", ("分子", "原子")),
            ("原子的结构", ("原子结构",)),
            ("元素", ("元素符号",)),
        ]),
        ("第4单元 自然界的水", [
            ("水的组成", ("电解水",)),
            ("化学式与化合价", ("化学式", "化合价")),
        ]),
        ("第5单元 化学方程式", [
            ("质量守恒定律", ()),
            ("化学方程式的书写", ("化学方程式",)),
            ("利用化学方程式的简单计算", ("化学方程式计算",)),
        ]),
        ("第6单元 碳和碳的氧化物", [
            ("碳的单质", ("金刚石", "石墨")),
            ("二氧化碳的制取", ()),
            ("二氧化碳和一氧化碳", ("二氧化碳", "一氧化碳")),
        ]),
    ],
    "九年级下": [
        ("第8单元 金属和金属材料", [
            ("金属材料", ("合金",)),
            ("金属的化学性质", ("金属活动性顺序",)),
        ]),
        ("第9单元 溶液", [
            ("溶液的形成", ("溶液",)),
            ("溶解度", ("溶解度曲线",)),
            ("溶质的质量分数", ("质量分数",)),
        ]),
        ("第10单元 酸和碱", [
            ("常见的酸和碱", ("酸", "碱")),
            ("酸和碱的中和反应", ("中和反应", "pH")),
        ]),
        ("第11单元 盐 化肥", [
            ("生活中常见的盐", ("盐", "复分解反应")),
            ("化学肥料", ("化肥",)),
        ]),
    ],
}
